"""
User service layer - the in-memory user store.

All operations are coroutines that await a simulated latency before running
a synchronous body. Because the body never suspends, each operation is
atomic with respect to other coroutines on the same event loop.
"""

import asyncio
import logging
import random
from typing import Any, Dict, List, Mapping, Optional

from reporting_examples.config import settings
from reporting_examples.core.errors import (
    DuplicateEmail,
    FlakyOperationError,
    InvalidAge,
    InvalidEmail,
    InvalidName,
    SimulatedError,
    UserNotFound,
)
from reporting_examples.core.user import User

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "email", "age")


class UserService:
    """Service owning the user collection and identity assignment."""

    def __init__(
        self,
        latency_ms: Optional[float] = None,
        failure_rate: Optional[float] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize an empty store.

        Args:
            latency_ms: Simulated latency per operation (default: from settings)
            failure_rate: Probability that flaky_operation fails (default: from settings)
            rng: Random source for flaky_operation (default: module random)
        """
        self.latency_ms = settings.user_service_latency_ms if latency_ms is None else latency_ms
        self.failure_rate = settings.flaky_failure_rate if failure_rate is None else failure_rate
        self.rng = rng or random.Random()
        self.users: Dict[int, User] = {}
        self.next_id = 1

    async def _delay(self) -> None:
        """Simulate I/O latency."""
        if self.latency_ms > 0:
            await asyncio.sleep(self.latency_ms / 1000)
        else:
            await asyncio.sleep(0)

    def _find_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_user(self, name: Any, email: Any, age: Any) -> User:
        """
        Create a new user.

        Args:
            name: Display name (1-100 characters after trimming)
            email: Email address, unique across the store
            age: Integer age in [0, 150]

        Returns:
            The created user with its assigned id

        Raises:
            InvalidName, InvalidEmail, InvalidAge: If validation fails
            DuplicateEmail: If another user already has this email
        """
        await self._delay()

        if not User.validate_name(name):
            raise InvalidName()
        if not User.validate_email(email):
            raise InvalidEmail()
        if not User.validate_age(age):
            raise InvalidAge()

        if self._find_by_email(email) is not None:
            logger.warning(f"Rejected duplicate email: {email}")
            raise DuplicateEmail()

        user = User(self.next_id, name, email, int(age))
        self.next_id += 1
        self.users[user.id] = user

        logger.info(f"Created user: {user.id} ({email})")
        return user

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_user_by_id(self, user_id: int) -> Optional[User]:
        await self._delay()
        return self.users.get(user_id)

    async def get_user_by_email(self, email: str) -> Optional[User]:
        await self._delay()
        return self._find_by_email(email)

    async def get_all_users(self) -> List[User]:
        await self._delay()
        return list(self.users.values())

    async def get_active_users(self) -> List[User]:
        await self._delay()
        return [user for user in self.users.values() if user.is_active]

    async def get_adult_users(self) -> List[User]:
        await self._delay()
        return [user for user in self.users.values() if user.is_adult()]

    async def get_user_count(self) -> int:
        await self._delay()
        return len(self.users)

    async def search_users(self, query: str) -> List[User]:
        """Case-insensitive substring match against name or email."""
        await self._delay()
        needle = query.lower()
        return [
            user for user in self.users.values()
            if (isinstance(user.name, str) and needle in user.name.lower())
            or (isinstance(user.email, str) and needle in user.email.lower())
        ]

    # ------------------------------------------------------------------
    # Update / Delete
    # ------------------------------------------------------------------

    async def update_user(self, user_id: int, updates: Mapping[str, Any]) -> User:
        """
        Apply a partial update of name, email and/or age.

        Every supplied field is validated before any of them is written, so a
        failed update leaves the user untouched. Keys other than name, email
        and age are ignored. Email uniqueness against other users is not
        re-checked here; a collision is only logged.

        Raises:
            UserNotFound: If no user has ``user_id``
            InvalidEmail, InvalidAge, InvalidName: If a supplied field is invalid
        """
        await self._delay()

        user = self.users.get(user_id)
        if user is None:
            raise UserNotFound()

        changes = {
            key: updates[key] for key in UPDATABLE_FIELDS
            if key in updates and updates[key] is not None
        }

        if "email" in changes and not User.validate_email(changes["email"]):
            raise InvalidEmail()
        if "age" in changes and not User.validate_age(changes["age"]):
            raise InvalidAge()
        if "name" in changes and not User.validate_name(changes["name"]):
            raise InvalidName()

        if "email" in changes:
            other = self._find_by_email(changes["email"])
            if other is not None and other.id != user_id:
                logger.warning(
                    f"User {user_id} now shares email {changes['email']} with user {other.id}"
                )

        for key, value in changes.items():
            setattr(user, key, int(value) if key == "age" else value)

        logger.info(f"Updated user: {user_id} ({', '.join(changes) or 'no changes'})")
        return user

    async def delete_user(self, user_id: int) -> bool:
        await self._delay()
        if self.users.pop(user_id, None) is None:
            raise UserNotFound()
        logger.info(f"Deleted user: {user_id}")
        return True

    async def reset(self) -> None:
        """Drop every user and restart id numbering at 1."""
        await self._delay()
        self.users.clear()
        self.next_id = 1
        logger.info("User store reset")

    # ------------------------------------------------------------------
    # Failure simulation
    # ------------------------------------------------------------------

    async def simulate_error(self) -> None:
        await self._delay()
        raise SimulatedError()

    async def flaky_operation(self) -> str:
        """Succeed most of the time; fail with probability ``failure_rate``."""
        await self._delay()
        if self.rng.random() < self.failure_rate:
            logger.warning("Flaky operation failed")
            raise FlakyOperationError()
        return "Success"
