"""Tests for email existence checks."""

from ninja_users.models import User
from ninja_users.repository import (
    InMemoryUserRepository,
    email_exists,
    get_default_repository,
    set_default_repository,
)


def test_seed_email_exists(store):
    assert store.email_exists("luismi@email.com") is True
    assert store.email_exists("nope@x.com") is False


def test_match_is_case_sensitive(store):
    assert store.email_exists("LUISMI@email.com") is False


def test_match_is_exact(store):
    assert store.email_exists("luismi@email.co") is False
    assert store.email_exists(" luismi@email.com") is False


def test_reflects_current_state(store):
    store.create({"username": "C", "email": "c@x.com"})
    assert store.email_exists("c@x.com") is True
    store.delete(1)
    assert store.email_exists("luismi@email.com") is False


def test_function_against_explicit_repository():
    repo = InMemoryUserRepository([User(username="Z", email="z@x.com", id=1)])
    assert email_exists("z@x.com", repo) is True
    assert email_exists("luismi@email.com", repo) is False


def test_function_defaults_to_seeded_process_repository():
    assert email_exists("luismi@email.com") is True
    assert email_exists("nope@x.com") is False


def test_function_sees_default_repository_changes():
    get_default_repository().create({"username": "C", "email": "c@x.com"})
    assert email_exists("c@x.com") is True


def test_set_default_repository():
    replacement = InMemoryUserRepository(seed=False)
    set_default_repository(replacement)
    assert get_default_repository() is replacement
    assert email_exists("luismi@email.com") is False


class _StaticEmails:
    """Minimal UserRepository stand-in that only knows a fixed set of emails."""

    def __init__(self, emails: set[str]) -> None:
        self._emails = emails

    def email_exists(self, email: str) -> bool:
        return email in self._emails


def test_function_accepts_any_user_repository():
    assert email_exists("a@x.com", _StaticEmails({"a@x.com"})) is True
    assert email_exists("luismi@email.com", _StaticEmails(set())) is False
