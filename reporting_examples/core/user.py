"""User entity with validation predicates and mutation methods."""

import re
from datetime import datetime, timezone
from typing import Any, Dict

from reporting_examples.core.errors import InvalidFormat, InvalidName, InvalidValue

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MIN_AGE = 0
MAX_AGE = 150
MAX_NAME_LENGTH = 100
ADULT_AGE = 18


class User:
    """
    A user record owned by the UserService store.

    The store assigns ``id`` and validates input before constructing a User;
    the entity only re-validates on its own mutation methods.
    """

    UNKNOWN_DISPLAY_NAME = "Unknown User"

    def __init__(self, id: int, name: str, email: str, age: int):
        self.id = id
        self.name = name
        self.email = email
        self.age = age
        self.created_at = datetime.now(timezone.utc)
        self.is_active = True

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, email={self.email!r})"

    # ------------------------------------------------------------------
    # Validators (never raise)
    # ------------------------------------------------------------------

    @staticmethod
    def validate_email(value: Any) -> bool:
        """Return True if ``value`` looks like ``local@domain.tld``."""
        if not isinstance(value, str):
            return False
        return EMAIL_PATTERN.fullmatch(value) is not None

    @staticmethod
    def validate_age(value: Any) -> bool:
        """Return True if ``value`` is an integer-valued number in [0, 150]."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        if isinstance(value, float) and not value.is_integer():
            return False
        return MIN_AGE <= value <= MAX_AGE

    @staticmethod
    def validate_name(value: Any) -> bool:
        """Return True if ``value`` is a string of 1-100 characters after trimming."""
        if not isinstance(value, str):
            return False
        return 1 <= len(value.strip()) <= MAX_NAME_LENGTH

    # ------------------------------------------------------------------
    # Derived properties
    # ------------------------------------------------------------------

    def is_adult(self) -> bool:
        return self.age >= ADULT_AGE

    def get_display_name(self) -> str:
        if isinstance(self.name, str) and self.name:
            return self.name
        return self.UNKNOWN_DISPLAY_NAME

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def update_email(self, new_email: str) -> None:
        """
        Change the email address.

        Raises:
            InvalidFormat: If ``new_email`` fails validation (state unchanged)
        """
        if not User.validate_email(new_email):
            raise InvalidFormat("Invalid email format")
        self.email = new_email

    def update_age(self, new_age: int) -> None:
        """
        Change the age.

        Raises:
            InvalidValue: If ``new_age`` fails validation (state unchanged)
        """
        if not User.validate_age(new_age):
            raise InvalidValue("Invalid age")
        self.age = int(new_age)

    def update_name(self, new_name: str) -> None:
        if not User.validate_name(new_name):
            raise InvalidName()
        self.name = new_name

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def to_dict(self) -> Dict[str, Any]:
        """Plain record of all fields plus ``is_adult``; ``created_at`` stays a datetime."""
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "age": self.age,
            "created_at": self.created_at,
            "is_active": self.is_active,
            "is_adult": self.is_adult(),
        }
