"""Tests for password hashing, bearer tokens and accounts."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from eventbook.domain.results import RegistrationOutcome
from eventbook.repos.memory import UserRepository
from eventbook.services.auth import (
    AccountService,
    InvalidAuthorizationHeader,
    InvalidTokenError,
    PasswordHasher,
    TokenIssuer,
    parse_bearer,
)


@pytest.fixture()
def accounts() -> AccountService:
    return AccountService(
        users=UserRepository(), hasher=PasswordHasher(), tokens=TokenIssuer("test-secret")
    )


def test_hash_and_verify():
    hasher = PasswordHasher()
    password_hash = hasher.hash("correct-horse")
    assert password_hash != "correct-horse"
    assert hasher.verify("correct-horse", password_hash)
    assert not hasher.verify("wrong-horse", password_hash)


def test_token_round_trip():
    tokens = TokenIssuer("test-secret")
    assert tokens.verify(tokens.issue("user-1")) == "user-1"


def test_token_from_other_secret_rejected():
    token = TokenIssuer("other-secret").issue("user-1")
    with pytest.raises(InvalidTokenError):
        TokenIssuer("test-secret").verify(token)


def test_expired_token_rejected():
    tokens = TokenIssuer("test-secret", expires_minutes=5)
    token = tokens.issue("user-1", now=datetime.now(timezone.utc) - timedelta(hours=1))
    with pytest.raises(InvalidTokenError):
        tokens.verify(token)


def test_empty_secret_rejected():
    with pytest.raises(ValueError):
        TokenIssuer("")


@pytest.mark.parametrize("header", [None, "", "Bearer", "Token abc", "Bearer a b"])
def test_malformed_bearer_header(header):
    with pytest.raises(InvalidAuthorizationHeader):
        parse_bearer(header)


def test_parse_bearer():
    assert parse_bearer("Bearer abc.def.ghi") == "abc.def.ghi"


def test_register_then_login(accounts):
    assert accounts.register("alice", "correct-horse") is RegistrationOutcome.CREATED
    token = accounts.login("alice", "correct-horse")
    user_id = accounts.authenticate(f"Bearer {token}")
    assert accounts.users.get(user_id).username == "alice"


def test_register_duplicate(accounts):
    accounts.register("alice", "correct-horse")
    assert accounts.register("alice", "another-pass") is RegistrationOutcome.DUPLICATE


def test_login_failures_are_indistinguishable(accounts):
    accounts.register("alice", "correct-horse")
    assert accounts.login("alice", "wrong-horse") is None
    assert accounts.login("nobody", "correct-horse") is None
