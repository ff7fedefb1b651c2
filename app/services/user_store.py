"""Thread-safe in-memory user store"""
from collections import OrderedDict
from dataclasses import dataclass
from enum import Enum
from threading import RLock
from typing import Generic, List, Optional, TypeVar

from app.models.user import User
from app.utils.logger import logger

T = TypeVar("T")

INVALID_PAGINATION_MESSAGE = "Page and pageSize must be positive integers."


class ErrorKind(str, Enum):
    """Expected failure kinds reported by the store"""
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class StoreError:
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    """Either a value or a StoreError, never both"""
    value: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "StoreResult[T]":
        return cls(error=StoreError(kind=kind, message=message))


def not_found_message(user_id: int) -> str:
    return f"User with ID {user_id} not found."


class UserStore:
    """
    In-memory user store with insertion-ordered listing.

    Features:
    - Monotonic id allocation starting at 1, ids never reused
    - Deterministic listing order (insertion order)
    - Thread-safe operations behind a single lock
    - Expected failures returned as StoreResult instead of raised
    """

    def __init__(self):
        self._users: "OrderedDict[int, User]" = OrderedDict()
        self._next_id = 1
        self._lock = RLock()

    def list(self, page: int, page_size: int) -> StoreResult[List[User]]:
        """
        Get one page of users.

        Args:
            page: 1-based page number
            page_size: Maximum number of users per page

        Returns:
            The slice [(page-1)*page_size, page*page_size) in insertion order,
            or an INVALID_ARGUMENT error for non-positive arguments
        """
        if page <= 0 or page_size <= 0:
            return StoreResult.failure(ErrorKind.INVALID_ARGUMENT, INVALID_PAGINATION_MESSAGE)

        start = (page - 1) * page_size
        with self._lock:
            users = list(self._users.values())[start:start + page_size]
        return StoreResult.success(users)

    def get(self, user_id: int) -> StoreResult[User]:
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            return StoreResult.failure(ErrorKind.NOT_FOUND, not_found_message(user_id))
        return StoreResult.success(user)

    def create(self, name: str, email: str, password: str) -> User:
        """Store a new user under the next free id and return it"""
        with self._lock:
            user = User(id=self._next_id, name=name, email=email, password=password)
            self._users[user.id] = user
            self._next_id += 1

        logger.info(f"Created user {user.id}")
        return user

    def update(self, user_id: int, name: str, email: str, password: str) -> StoreResult[User]:
        """Overwrite name, email and password of an existing user"""
        with self._lock:
            user = self._users.get(user_id)
            if user is None:
                return StoreResult.failure(ErrorKind.NOT_FOUND, not_found_message(user_id))

            user.name = name
            user.email = email
            user.password = password

        logger.info(f"Updated user {user_id}")
        return StoreResult.success(user)

    def delete(self, user_id: int) -> StoreResult[None]:
        with self._lock:
            if self._users.pop(user_id, None) is None:
                return StoreResult.failure(ErrorKind.NOT_FOUND, not_found_message(user_id))

        logger.info(f"Deleted user {user_id}")
        return StoreResult.success()

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def clear(self) -> None:
        """Remove all users and restart id allocation at 1"""
        with self._lock:
            self._users.clear()
            self._next_id = 1
            logger.info("User store cleared")
