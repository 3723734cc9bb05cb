"""User record models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """A stored user.

    ``id`` is normally assigned by the repository on create. Passing it
    explicitly is meant for seed data only; it defaults to ``0``.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: int = Field(default=0, description="Store-assigned identifier.")
    username: str = Field(description="Display name, mutable.")
    email: str = Field(description="Email address. Uniqueness is advisory.")


class UserCreate(BaseModel):
    """Payload for creating a user. Any ``id`` supplied by the caller is dropped."""

    model_config = ConfigDict(extra="ignore")

    username: str
    email: str


class UserUpdate(BaseModel):
    """Payload for updating a user.

    Only ``username`` is applied by the repository. ``id`` is read by
    ``update()`` to locate the target; ``email`` is accepted so a full user
    record can be passed back, but it is not written.
    """

    model_config = ConfigDict(extra="ignore")

    username: str
    email: str | None = None
    id: int | None = None


SEED_USERS: tuple[User, ...] = (
    User(username="Luis Miguel López", email="luismi@email.com", id=1),
    User(username="Ángel Naranjo", email="angel@email.com", id=2),
)


def seed_users() -> list[User]:
    """Return fresh copies of the seed records."""
    return [user.model_copy() for user in SEED_USERS]
