"""
Server-side session stores.

A session maps an opaque token to a user id and nothing else; the user is
reloaded from the users table on every request.
"""
import logging
from datetime import datetime
from typing import Optional
from homestay.models.session import AuthSession
from homestay.storage.base import StoreAccess

logger = logging.getLogger(__name__)


def _utcnow():
    # Naive UTC, matching the DateTime columns.
    return datetime.utcnow()


class SessionStore:
    """Interface: get / set / destroy a session by token, prune expired ones."""

    def get(self, token: str) -> Optional[int]:
        raise NotImplementedError

    def set(self, token: str, user_id: int, expires_at: datetime) -> None:
        raise NotImplementedError

    def destroy(self, token: str) -> None:
        raise NotImplementedError

    def prune(self) -> int:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """Sessions held in a dict. Lost on restart; one process only."""

    def __init__(self):
        self._sessions = {}

    def get(self, token):
        entry = self._sessions.get(token)
        if entry is None:
            return None
        user_id, expires_at = entry
        if expires_at <= _utcnow():
            self._sessions.pop(token, None)
            return None
        return user_id

    def set(self, token, user_id, expires_at):
        self._sessions[token] = (user_id, expires_at)

    def destroy(self, token):
        self._sessions.pop(token, None)

    def prune(self) -> int:
        now = _utcnow()
        expired = [token for token, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for token in expired:
            del self._sessions[token]
        return len(expired)

    def __len__(self):
        return len(self._sessions)


class DatabaseSessionStore(StoreAccess, SessionStore):
    """Sessions kept in the ``auth_sessions`` table."""

    entity = "Session"

    def get(self, token):
        with self._guard("get Session"):
            row = self.db.query(AuthSession).filter(AuthSession.token == token).first()
            if row is None:
                return None
            if row.expires_at <= _utcnow():
                self.db.delete(row)
                self.db.commit()
                logger.debug("Expired session removed")
                return None
            return row.user_id

    def set(self, token, user_id, expires_at):
        with self._guard("set Session"):
            self.db.merge(AuthSession(token=token, user_id=user_id, expires_at=expires_at))
            self.db.commit()

    def destroy(self, token):
        with self._guard("destroy Session"):
            self.db.query(AuthSession).filter(AuthSession.token == token).delete(
                synchronize_session=False
            )
            self.db.commit()

    def prune(self) -> int:
        """Delete every expired session. Returns how many were removed."""
        with self._guard("prune Session"):
            removed = (
                self.db.query(AuthSession)
                .filter(AuthSession.expires_at <= _utcnow())
                .delete(synchronize_session=False)
            )
            self.db.commit()
        return removed
