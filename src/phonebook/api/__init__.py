"""
HTTP API for the Phonebook service
"""
