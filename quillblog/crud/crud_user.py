# quillblog/crud/crud_user.py
import logging
from typing import Optional
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from quillblog.core.errors import Conflict
from quillblog.core.security import get_password_hash, verify_password
from quillblog.models.user import User
from quillblog.schemas.user import UserCreate

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def create_user(db: Session, user: UserCreate) -> User:
    logger.info(f"Registering user: {user.username}")
    existing = db.query(User.id).filter(
        or_(User.username == user.username, User.email == user.email)
    ).first()
    if existing:
        raise Conflict("Username or email already exists")

    db_user = User(
        username=user.username,
        email=user.email,
        hashed_password=get_password_hash(user.password),
    )
    db.add(db_user)
    try:
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration
        db.rollback()
        raise Conflict("Username or email already exists")
    db.refresh(db_user)
    logger.info(f"User registered successfully. ID: {db_user.id}")
    return db_user


def authenticate(db: Session, username: str, password: str) -> Optional[User]:
    user = get_user_by_username(db, username)
    if not user or not verify_password(password, user.hashed_password):
        logger.warning(f"Failed login attempt for username: {username}")
        return None
    return user
