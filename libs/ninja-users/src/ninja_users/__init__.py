"""Ninja Users — in-memory user repository with advisory email uniqueness."""

from ninja_users.config import UserStoreConfig
from ninja_users.exceptions import DuplicateEmailError, UserStoreConfigError, UserStoreError
from ninja_users.models import SEED_USERS, User, UserCreate, UserUpdate, seed_users
from ninja_users.protocols import UserRepository
from ninja_users.repository import (
    InMemoryUserRepository,
    email_exists,
    get_default_repository,
    reset_default_repository,
    set_default_repository,
)

__all__ = [
    "DuplicateEmailError",
    "InMemoryUserRepository",
    "SEED_USERS",
    "User",
    "UserCreate",
    "UserRepository",
    "UserStoreConfig",
    "UserStoreConfigError",
    "UserStoreError",
    "UserUpdate",
    "email_exists",
    "get_default_repository",
    "reset_default_repository",
    "seed_users",
    "set_default_repository",
]
