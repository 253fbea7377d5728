import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from fastapi import Depends, Request, Response, status
from jose import JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session
from homestay import config
from homestay.db import get_db
from homestay.errors import ApiError
from homestay.schemas.user import UserPublic
from homestay.storage.sessions import DatabaseSessionStore, SessionStore
from homestay.storage.users import UserRepository

logger = logging.getLogger(__name__)

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    """Verify a plain password against a hashed password."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    """Hash a password for storage."""
    return pwd_context.hash(password)


def sign_session_token(token: str, expires_at: datetime) -> str:
    """Wrap a session token in a signed JWT for the cookie value."""
    return jwt.encode(
        {"sid": token, "exp": expires_at}, config.SECRET_KEY, algorithm=config.ALGORITHM
    )


def read_session_token(cookie_value: Optional[str]) -> Optional[str]:
    """Return the session token from a cookie value, or None if it is not trustworthy."""
    if not cookie_value:
        return None
    try:
        payload = jwt.decode(cookie_value, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except JWTError as e:
        logger.debug(f"Rejected session cookie: {e}")
        return None
    token = payload.get("sid")
    return token if isinstance(token, str) else None


def get_session_store(request: Request, db: Session = Depends(get_db)) -> SessionStore:
    """Session store for this request: the app's own store if it has one, else the database."""
    store = getattr(request.app.state, "session_store", None)
    if store is not None:
        return store
    return DatabaseSessionStore(db)


def start_session(response: Response, store: SessionStore, user_id: int) -> str:
    """Issue a new session for ``user_id`` and attach its cookie to the response."""
    token = secrets.token_urlsafe(32)
    expires_at = datetime.utcnow() + timedelta(seconds=config.SESSION_MAX_AGE_SECONDS)
    store.set(token, user_id, expires_at)
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=sign_session_token(token, expires_at),
        max_age=config.SESSION_MAX_AGE_SECONDS,
        httponly=True,
        samesite="lax",
        secure=config.SESSION_COOKIE_SECURE,
    )
    logger.debug(f"Session started for user {user_id}")
    return token


def end_session(request: Request, response: Response, store: SessionStore):
    token = read_session_token(request.cookies.get(config.SESSION_COOKIE_NAME))
    if token is not None:
        store.destroy(token)
    response.delete_cookie(config.SESSION_COOKIE_NAME, samesite="lax")


def get_optional_user(
    request: Request,
    db: Session = Depends(get_db),
    store: SessionStore = Depends(get_session_store),
) -> Optional[UserPublic]:
    """Resolve the session cookie to a user, or None when anonymous."""
    token = read_session_token(request.cookies.get(config.SESSION_COOKIE_NAME))
    if token is None:
        return None
    user_id = store.get(token)
    if user_id is None:
        return None
    user = UserRepository(db).get_by_id(user_id)
    if user is None:
        # The account is gone; the session is useless.
        store.destroy(token)
    return user


def get_current_user(user: Optional[UserPublic] = Depends(get_optional_user)) -> UserPublic:
    """Require an authenticated session."""
    if user is None:
        raise ApiError(
            status_code=status.HTTP_401_UNAUTHORIZED,
            message="Authentication required",
        )
    return user
