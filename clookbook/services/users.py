"""
User Service

Credential store operations: lookups, registration and password checks.
Routers translate the outcomes into HTTP responses.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from clookbook.models.user import User
from clookbook.services.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class EmailAlreadyRegisteredError(Exception):
    """Raised when signing up with an email that already has an account."""

    def __init__(self, email: str):
        super().__init__(f"Email already registered: {email}")
        self.email = email


def normalize_email(email: str) -> str:
    return email.strip().lower()


def get_user_by_email(db: Session, email: str) -> User | None:
    stmt = select(User).where(User.email == normalize_email(email))
    return db.execute(stmt).scalar_one_or_none()


def get_user_by_id(db: Session, user_id: int) -> User | None:
    return db.get(User, user_id)


def create_user(db: Session, email: str, password: str) -> User:
    """
    Register a new user with a bcrypt-hashed password.

    Raises:
        EmailAlreadyRegisteredError: if the email is taken, including when a
            concurrent signup wins the unique index on commit
    """
    email = normalize_email(email)

    if get_user_by_email(db, email) is not None:
        raise EmailAlreadyRegisteredError(email)

    user = User(email=email, hashed_password=hash_password(password))
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise EmailAlreadyRegisteredError(email) from None
    db.refresh(user)

    logger.info(f"New user registered: id={user.id}")
    return user


def authenticate_user(db: Session, email: str, password: str) -> User | None:
    """
    Check credentials.

    Returns None both for an unknown email and for a wrong password so
    callers cannot tell which one failed.
    """
    user = get_user_by_email(db, email)
    if user is None:
        return None
    if not verify_password(password, user.hashed_password):
        return None
    return user
