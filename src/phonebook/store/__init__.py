"""Person backing stores."""

from .base import (
    Address,
    DuplicateNameError,
    PersonDraft,
    PersonRecord,
    PersonStore,
    PhoneUpdate,
    ReadOnlyStoreError,
    StoreError,
    ValidationError,
    address_of,
    validate_draft,
    validate_phone_update,
)
from .factory import close_person_store, create_person_store, get_person_store, set_person_store
from .memory import InMemoryPersonStore

__all__ = [
    "Address",
    "DuplicateNameError",
    "InMemoryPersonStore",
    "PersonDraft",
    "PersonRecord",
    "PersonStore",
    "PhoneUpdate",
    "ReadOnlyStoreError",
    "StoreError",
    "ValidationError",
    "address_of",
    "close_person_store",
    "create_person_store",
    "get_person_store",
    "set_person_store",
    "validate_draft",
    "validate_phone_update",
]
