"""Domain exceptions for the user store.

Lookups that miss return ``None`` rather than raising. The exceptions below
cover the remaining failure modes: opt-in uniqueness enforcement and
configuration loading.
"""

from __future__ import annotations


class UserStoreError(Exception):
    """Base exception for all user-store errors.

    Attributes:
        operation: The operation that failed (e.g. ``"create"``, ``"load_config"``).
        detail: A description of what went wrong.
    """

    entity_name = "User"

    def __init__(self, *, operation: str, detail: str, cause: Exception | None = None) -> None:
        self.operation = operation
        self.detail = detail
        super().__init__(f"[{self.entity_name}] {operation} failed: {detail}")
        if cause is not None:
            self.__cause__ = cause


class DuplicateEmailError(UserStoreError):
    """Raised when a create would store an email that is already taken.

    Only raised by stores configured with ``enforce_unique_email=True``.
    """

    def __init__(self, email: str, *, operation: str = "create") -> None:
        self.email = email
        super().__init__(operation=operation, detail=f"email '{email}' is already registered")


class UserStoreConfigError(UserStoreError):
    """Raised when a user-store config file cannot be read or validated."""

    entity_name = "UserStoreConfig"
