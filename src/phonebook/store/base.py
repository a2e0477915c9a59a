"""Core person store interfaces, records and errors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

MIN_FIELD_LENGTH = 5


@dataclass(frozen=True)
class PersonRecord:
    """A stored person as held by a backing store."""

    id: str
    name: str
    street: str
    city: str
    phone: str | None = None

    @property
    def has_phone(self) -> bool:
        return bool(self.phone)

    def with_phone(self, phone: str | None) -> "PersonRecord":
        return replace(self, phone=phone)


@dataclass(frozen=True)
class Address:
    """Address value object derived from a person's street and city."""

    street: str
    city: str


def address_of(record: PersonRecord) -> Address:
    """Project the address of a person. Never stored on its own."""
    return Address(street=record.street, city=record.city)


class PersonDraft(BaseModel):
    """Validated input for a new person."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=MIN_FIELD_LENGTH)
    phone: str | None = Field(default=None, min_length=MIN_FIELD_LENGTH)
    street: str = Field(min_length=MIN_FIELD_LENGTH)
    city: str = Field(min_length=MIN_FIELD_LENGTH)


class PhoneUpdate(BaseModel):
    """Validated input for a phone number change."""

    name: str
    phone: str = Field(min_length=MIN_FIELD_LENGTH)


class StoreError(Exception):
    """Base exception for person store operations."""

    pass


class DuplicateNameError(StoreError):
    """A person with the same name already exists."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Name must be unique: {name!r} already exists")


class ValidationError(StoreError):
    """Submitted person fields violate their constraints."""

    def __init__(self, args: dict[str, Any], errors: dict[str, str]):
        self.invalid_args = args
        self.errors = errors
        details = "; ".join(f"{field}: {message}" for field, message in errors.items())
        super().__init__(f"Person validation failed: {details}")


class ReadOnlyStoreError(StoreError):
    """Write attempted against a store that cannot be written."""

    pass


def _field_errors(exc: PydanticValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or "__root__"
        errors.setdefault(field, error["msg"])
    return errors


def validate_draft(
    name: str, street: str, city: str, phone: str | None = None
) -> PersonDraft:
    """Validate new person fields.

    Raises:
        ValidationError: If any field violates its constraints
    """
    args = {"name": name, "phone": phone, "street": street, "city": city}
    try:
        return PersonDraft(**args)
    except PydanticValidationError as e:
        raise ValidationError(args, _field_errors(e)) from e


def validate_phone_update(name: str, phone: str) -> PhoneUpdate:
    """Validate a phone number change.

    Raises:
        ValidationError: If the phone number violates its constraints
    """
    args = {"name": name, "phone": phone}
    try:
        return PhoneUpdate(**args)
    except PydanticValidationError as e:
        raise ValidationError(args, _field_errors(e)) from e


def matches_phone_filter(record: PersonRecord, has_phone: bool | None) -> bool:
    if has_phone is None:
        return True
    return record.has_phone is has_phone


class PersonStore(ABC):
    """Abstract base class for all person backing stores."""

    name: str = "abstract"

    @abstractmethod
    async def count(self) -> int:
        """Return the number of stored persons."""
        pass

    @abstractmethod
    async def list_all(self, has_phone: bool | None = None) -> list[PersonRecord]:
        """Return all persons, optionally filtered by phone presence.

        Args:
            has_phone: None for everyone, True for persons with a phone,
                False for persons without one
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> PersonRecord | None:
        """Return the person with exactly this name, or None."""
        pass

    @abstractmethod
    async def insert(self, draft: PersonDraft) -> PersonRecord:
        """Store a new person and return it with its assigned id.

        Raises:
            DuplicateNameError: If the name is already taken
        """
        pass

    @abstractmethod
    async def update_phone_by_name(self, update: PhoneUpdate) -> PersonRecord | None:
        """Replace the phone of the named person.

        Returns:
            The updated person, or None if no person has that name
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the store."""
        return None
