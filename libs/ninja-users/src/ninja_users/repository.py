"""In-memory user repository and the process-wide default instance."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel

from ninja_users.config import UserStoreConfig
from ninja_users.exceptions import DuplicateEmailError
from ninja_users.models import User, UserCreate, UserUpdate, seed_users
from ninja_users.protocols import UserRepository

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


def _coerce(payload: BaseModel | Mapping[str, Any], model: type[_M]) -> _M:
    """Validate *payload* into *model*, accepting other models or plain mappings."""
    if isinstance(payload, model):
        return payload
    if isinstance(payload, BaseModel):
        return model.model_validate(payload.model_dump())
    return model.model_validate(dict(payload))


class InMemoryUserRepository:
    """Ordered, list-backed user store.

    Users are kept in insertion order and every lookup is a linear scan.
    New ids are the last stored user's id plus one (or ``1`` for an empty
    store), so deleting the last user lets its id be handed out again.

    .. warning::
        All user data is lost on process restart.

    Args:
        users: Initial contents. When omitted the store is seeded with
            ``SEED_USERS`` unless *seed* is ``False``.
        seed: Whether to load the seed users when *users* is not given.
        enforce_unique_email: Raise ``DuplicateEmailError`` from ``create``
            when the email is already stored.
        copy_on_read: Hand out copies instead of the stored ``User`` objects.
    """

    def __init__(
        self,
        users: Iterable[User] | None = None,
        *,
        seed: bool = True,
        enforce_unique_email: bool = False,
        copy_on_read: bool = False,
    ) -> None:
        if users is not None:
            self._users: list[User] = [user.model_copy() for user in users]
        else:
            self._users = seed_users() if seed else []
        self._lock = threading.Lock()
        self._enforce_unique_email = enforce_unique_email
        self._copy_on_read = copy_on_read
        logger.warning(
            "User repository is in-memory only (%d initial users). All changes are lost on restart.",
            len(self._users),
        )

    @classmethod
    def from_config(cls, config: UserStoreConfig) -> InMemoryUserRepository:
        """Build a repository from a ``UserStoreConfig``."""
        return cls(
            seed=config.seed,
            enforce_unique_email=config.enforce_unique_email,
            copy_on_read=config.copy_on_read,
        )

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self.find_all())

    def __contains__(self, id: object) -> bool:
        with self._lock:
            return self._index_of(id) != -1

    def _index_of(self, id: object) -> int:
        for position, user in enumerate(self._users):
            if user.id == id:
                return position
        return -1

    def _read(self, user: User) -> User:
        return user.model_copy(deep=True) if self._copy_on_read else user

    def _next_id(self) -> int:
        return self._users[-1].id + 1 if self._users else 1

    def find_all(self) -> list[User]:
        with self._lock:
            return [self._read(user) for user in self._users]

    def find_by_id(self, id: int) -> User | None:
        with self._lock:
            position = self._index_of(id)
            return None if position == -1 else self._read(self._users[position])

    def create(self, new_user: UserCreate | Mapping[str, Any]) -> User:
        payload = _coerce(new_user, UserCreate)
        with self._lock:
            if self._enforce_unique_email and self._has_email(payload.email):
                raise DuplicateEmailError(payload.email)
            user = User(id=self._next_id(), username=payload.username, email=payload.email)
            self._users.append(user)
            logger.debug("Created user %d", user.id)
            return self._read(user)

    def update_by_id(self, id: int, modified_user: UserUpdate | Mapping[str, Any]) -> User | None:
        """Overwrite the username of the user with *id*.

        Only ``username`` is written; ``email`` and ``id`` are left as stored
        even when present in *modified_user*. Returns the updated user, or
        ``None`` without touching anything when *id* is unknown.
        """
        patch = _coerce(modified_user, UserUpdate)
        with self._lock:
            position = self._index_of(id)
            if position == -1:
                logger.debug("Update skipped: no user with id %r", id)
                return None
            user = self._users[position]
            user.username = patch.username
            logger.debug("Updated user %d", user.id)
            return self._read(user)

    def update(self, modified_user: UserUpdate | Mapping[str, Any]) -> User | None:
        """Variant of ``update_by_id`` where the id travels inside the payload."""
        patch = _coerce(modified_user, UserUpdate)
        if patch.id is None:
            logger.debug("Update skipped: payload carries no id")
            return None
        return self.update_by_id(patch.id, patch)

    def delete(self, id: int) -> None:
        with self._lock:
            position = self._index_of(id)
            if position == -1:
                logger.debug("Delete skipped: no user with id %r", id)
                return
            del self._users[position]
            logger.debug("Deleted user %r", id)

    def _has_email(self, email: str) -> bool:
        return any(user.email == email for user in self._users)

    def email_exists(self, email: str) -> bool:
        """Exact, case-sensitive check against the stored emails."""
        with self._lock:
            return self._has_email(email)


_default_repository: InMemoryUserRepository | None = None
_default_lock = threading.Lock()


def get_default_repository() -> InMemoryUserRepository:
    """Return the process-wide repository, creating it from ``UserStoreConfig.from_env()`` on first use."""
    global _default_repository
    with _default_lock:
        if _default_repository is None:
            _default_repository = InMemoryUserRepository.from_config(UserStoreConfig.from_env())
        return _default_repository


def set_default_repository(repository: InMemoryUserRepository) -> None:
    """Replace the process-wide repository."""
    global _default_repository
    with _default_lock:
        _default_repository = repository


def reset_default_repository() -> None:
    """Drop the process-wide repository so the next access rebuilds it with seed data."""
    global _default_repository
    with _default_lock:
        _default_repository = None


def email_exists(email: str, repository: UserRepository | None = None) -> bool:
    """Return ``True`` if *email* is already used by a user in *repository*.

    Checks the process-wide repository when *repository* is omitted. This is
    advisory: ``create`` does not call it unless uniqueness is enforced.
    """
    target = repository if repository is not None else get_default_repository()
    return target.email_exists(email)
