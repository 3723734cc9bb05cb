"""User repository protocol."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ninja_users.models import User, UserCreate, UserUpdate


@runtime_checkable
class UserRepository(Protocol):
    """Protocol for user storage backends.

    Misses are reported as ``None`` (or a silent no-op for ``delete``),
    never as exceptions.
    """

    def find_all(self) -> list[User]:
        """Return every stored user in insertion order."""
        ...

    def find_by_id(self, id: int) -> User | None:
        """Return the first user with the given id, or ``None``."""
        ...

    def create(self, new_user: UserCreate | Mapping[str, Any]) -> User:
        """Store a new user under a repository-assigned id and return it."""
        ...

    def update_by_id(self, id: int, modified_user: UserUpdate | Mapping[str, Any]) -> User | None:
        """Overwrite the username of the user with the given id."""
        ...

    def update(self, modified_user: UserUpdate | Mapping[str, Any]) -> User | None:
        """Same as ``update_by_id`` with the id taken from the payload."""
        ...

    def delete(self, id: int) -> None:
        """Remove the user with the given id, if any."""
        ...

    def email_exists(self, email: str) -> bool:
        """Return ``True`` if any stored user has exactly this email."""
        ...
