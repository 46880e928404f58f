# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

from datetime import datetime, timedelta

import pytest

from src.models import User
from src.models.session import Session as SessionModel
from src.schemas.auth import RegisterRequest
from src.security import get_password_hash
from src.services import auth_service
from src.services.auth_service import AccountExistsError


def create_user(db_session, username: str = "existing") -> User:
    """Helper to create a persisted user."""
    user = User(
        username=username,
        email=f"{username}@example.com",
        hashed_password=get_password_hash("Secret123!"),
        is_active=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def test_register_user_hashes_password(db_session):
    request = RegisterRequest(
        username="newuser",
        email="new@example.com",
        password="ComplexPass1!",
        full_name="New User",
    )

    user = auth_service.register_user(db_session, request)

    assert user.is_active is True
    assert user.full_name == "New User"
    assert user.hashed_password != "ComplexPass1!"
    assert auth_service.authenticate(db_session, "newuser", "ComplexPass1!") == user


def test_authenticate_success_and_failures(db_session):
    user = create_user(db_session, username="authuser")
    assert auth_service.authenticate(db_session, "authuser", "Secret123!") == user
    assert auth_service.authenticate(db_session, "authuser", "wrong") is None
    assert auth_service.authenticate(db_session, "nouser", "Secret123!") is None

    user.is_active = False
    db_session.commit()
    assert auth_service.authenticate(db_session, "authuser", "Secret123!") is None


def test_session_lifecycle(db_session):
    user = create_user(db_session, "sessionuser")
    token = auth_service.create_session(db_session, user)
    session = auth_service.get_session(db_session, token)
    assert session is not None
    assert session.user_id == user.id

    # Force expiry and ensure it gets deleted
    session.expires_at = datetime.utcnow() - timedelta(days=1)
    db_session.commit()
    assert auth_service.get_session(db_session, token) is None
    assert auth_service.delete_session(db_session, token) is False


def test_delete_session_returns_true(db_session):
    user = create_user(db_session, "deleteuser")
    token = auth_service.create_session(db_session, user)
    assert auth_service.delete_session(db_session, token) is True
    assert auth_service.delete_session(db_session, "missing") is False


def test_get_user_helpers(db_session):
    user = create_user(db_session, "lookup")
    assert auth_service.get_user_by_id(db_session, user.id) == user
    assert auth_service.get_user_by_username(db_session, "lookup") == user
    assert auth_service.get_user_by_email(db_session, "lookup@example.com") == user


def test_register_rejects_taken_username_and_email(db_session):
    create_user(db_session, "taken")

    with pytest.raises(AccountExistsError, match="Username"):
        auth_service.register_user(
            db_session,
            RegisterRequest(
                username="taken", email="other@example.com", password="Secret123!"
            ),
        )
    with pytest.raises(AccountExistsError, match="Email"):
        auth_service.register_user(
            db_session,
            RegisterRequest(
                username="fresh", email="taken@example.com", password="Secret123!"
            ),
        )


def test_new_session_purges_expired_ones(db_session):
    user = create_user(db_session, "traveller")
    other = create_user(db_session, "companion")
    stale = datetime.utcnow() - timedelta(days=1)
    db_session.add_all(
        [
            SessionModel(user_id=user.id, token="stale-own", expires_at=stale),
            SessionModel(user_id=other.id, token="stale-other", expires_at=stale),
        ]
    )
    db_session.commit()

    token = auth_service.create_session(db_session, user)

    tokens = {s.token for s in db_session.query(SessionModel).all()}
    assert tokens == {token, "stale-other"}
