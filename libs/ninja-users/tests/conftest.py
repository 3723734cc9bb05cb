"""Shared fixtures for ninja-users tests."""

import pytest
from ninja_users.repository import InMemoryUserRepository, reset_default_repository


@pytest.fixture(autouse=True)
def _fresh_default_repository(monkeypatch, tmp_path):
    """Isolate the process-wide repository and its config lookup per test."""
    monkeypatch.delenv("NINJA_USERS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    reset_default_repository()
    yield
    reset_default_repository()


@pytest.fixture
def store() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def empty_store() -> InMemoryUserRepository:
    return InMemoryUserRepository(seed=False)
