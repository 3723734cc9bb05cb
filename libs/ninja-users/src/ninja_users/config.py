"""User store configuration loaded from .ninjastack/users.json."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from ninja_users.exceptions import UserStoreConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = ".ninjastack/users.json"
CONFIG_PATH_ENV = "NINJA_USERS_CONFIG"


class UserStoreConfig(BaseModel):
    """Behaviour switches for ``InMemoryUserRepository``."""

    seed: bool = Field(default=True, description="Load the two seed users on construction.")
    enforce_unique_email: bool = Field(
        default=False,
        description="Reject creates whose email is already stored instead of only advising via email_exists().",
    )
    copy_on_read: bool = Field(
        default=False,
        description="Return copies from find_all()/find_by_id() instead of the stored objects.",
    )

    model_config = {"extra": "forbid"}

    @classmethod
    def from_file(cls, path: str | Path = DEFAULT_CONFIG_PATH) -> UserStoreConfig:
        """Load config from a JSON file, falling back to defaults."""
        p = Path(path)
        if not p.exists():
            return cls()
        try:
            data: dict[str, Any] = json.loads(p.read_text(encoding="utf-8"))
            return cls.model_validate(data)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
            logger.warning("Rejected user store config %s: %s", p, exc)
            raise UserStoreConfigError(
                operation="load_config",
                detail=f"invalid config file '{p}'",
                cause=exc,
            ) from exc

    @classmethod
    def from_env(cls) -> UserStoreConfig:
        """Load config from the file named by ``NINJA_USERS_CONFIG``."""
        return cls.from_file(os.environ.get(CONFIG_PATH_ENV, DEFAULT_CONFIG_PATH))
