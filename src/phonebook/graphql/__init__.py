"""
GraphQL API for the Phonebook service
"""
