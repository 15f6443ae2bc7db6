"""
In-memory user collection
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from .logging import get_logger

logger = get_logger(__name__)

DEFAULT_SEED = (
    ("1", "test1", "email1"),
    ("2", "test2", "email2"),
)


class RosterError(Exception):
    """Base class for Roster errors."""

    pass


class UserNotFoundError(RosterError, LookupError):
    """Raised when a store position does not hold a user."""

    pass


@dataclass
class UserRecord:
    """A stored user."""

    id: str
    name: str
    email: str


class UserStore:
    """Ordered, mutable collection of users plus the id counter.

    Ids are assigned from a counter that only ever moves forward, so an id is
    never reused even after the user holding it is removed.
    """

    def __init__(self, users: Iterable[UserRecord] = (), next_id: int | None = None):
        self._users: list[UserRecord] = list(users)
        self._next_id = next_id if next_id is not None else _next_free_id(self._users)
        self._lock = threading.RLock()  # Re-entrant so resolvers can wrap find + mutate

    @classmethod
    def seeded(cls) -> "UserStore":
        """Create a store holding the demo users."""
        users = [UserRecord(id=id, name=name, email=email) for id, name, email in DEFAULT_SEED]
        return cls(users)

    @property
    def next_id(self) -> int:
        return self._next_id

    def __len__(self) -> int:
        return len(self._users)

    @contextmanager
    def transaction(self) -> Iterator["UserStore"]:
        """Hold the store lock for a lookup followed by a mutation."""
        with self._lock:
            yield self

    def list_all(self) -> list[UserRecord]:
        """Return all users in insertion order."""
        with self._lock:
            return list(self._users)

    def find_index_by_id(self, user_id: str) -> int | None:
        """Return the position of the first user with this id, or None."""
        with self._lock:
            for index, user in enumerate(self._users):
                if user.id == user_id:
                    return index
        return None

    def get(self, index: int) -> UserRecord:
        with self._lock:
            self._check_index(index)
            return self._users[index]

    def insert(self, name: str, email: str) -> UserRecord:
        """Append a new user under the next id and return it."""
        with self._lock:
            user = UserRecord(id=str(self._next_id), name=name, email=email)
            self._next_id += 1
            next_id = self._next_id
            self._users.append(user)

        logger.debug("User inserted", user_id=user.id, next_id=next_id)
        return user

    def remove_at(self, index: int) -> UserRecord:
        """Remove and return the user at this position.

        Raises:
            UserNotFoundError: If no user is stored at that position
        """
        with self._lock:
            self._check_index(index)
            user = self._users.pop(index)

        logger.debug("User removed", user_id=user.id, index=index)
        return user

    def clear(self) -> None:
        """Drop every user. The id counter is kept."""
        with self._lock:
            count = len(self._users)
            self._users.clear()

        logger.debug("User store cleared", removed=count)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._users):
            raise UserNotFoundError(f"No user at position {index}")


def _next_free_id(users: list[UserRecord]) -> int:
    numeric_ids = [int(user.id) for user in users if user.id.isdigit()]
    return max(numeric_ids, default=0) + 1
