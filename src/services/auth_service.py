# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service.

Travellers log in with a username and password and get a server-side session
whose token travels in the session cookie. Trips are owned by the user the
session resolves to.
"""

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from src.config import get_settings
from src.models import User
from src.models.session import Session as SessionModel
from src.schemas.auth import RegisterRequest
from src.security import get_password_hash, verify_password

logger = logging.getLogger(__name__)


class AccountExistsError(ValueError):
    """Raised when a username or email is already registered."""


def register_user(db: Session, data: RegisterRequest) -> User:
    """Register a new traveller account.

    Usernames and emails are unique across all travellers.
    """
    if get_user_by_username(db, data.username):
        raise AccountExistsError("Username already exists")
    if get_user_by_email(db, data.email):
        raise AccountExistsError("Email already exists")

    user = User(
        username=data.username,
        email=data.email,
        hashed_password=get_password_hash(data.password),
        is_active=True,
        full_name=data.full_name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info(f"Registered traveller {user.username}")
    return user


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Return the active user matching the credentials, or None."""
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed login for {username}")
        return None
    if not user.is_active:
        logger.warning(f"Login attempt for deactivated account {username}")
        return None
    return user


def create_session(db: Session, user: User) -> str:
    """Open a session for a user and return its cookie token.

    The user's expired sessions are removed at the same time, so stale rows
    do not pile up for travellers who never log out.
    """
    now = datetime.utcnow()
    purged = (
        db.query(SessionModel)
        .filter(SessionModel.user_id == user.id, SessionModel.expires_at < now)
        .delete(synchronize_session=False)
    )
    if purged:
        logger.debug(f"Removed {purged} expired session(s) for {user.username}")

    token = str(uuid.uuid4())
    db.add(
        SessionModel(
            user_id=user.id,
            token=token,
            expires_at=now + timedelta(days=get_settings().session_expiry_days),
        )
    )
    db.commit()
    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a live session by token. An expired session is deleted."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < datetime.utcnow():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token. Returns False when there was none."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return False
    db.delete(session)
    db.commit()
    return True


def get_user_by_id(db: Session, user_id: uuid.UUID) -> User | None:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    return db.query(User).filter(User.username == username).first()


def get_user_by_email(db: Session, email: str) -> User | None:
    return db.query(User).filter(User.email == email).first()
