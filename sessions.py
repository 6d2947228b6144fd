"""
Server-side sessions.

The cookie only carries a signed session id; session data lives in a
SessionStore. The default store keeps everything in process memory, so all
sessions are dropped when the server restarts. Swap in another SessionStore
implementation for persistence.
"""

import hashlib
import hmac
import os
import secrets
from abc import ABC, abstractmethod
from typing import Optional

SESSION_COOKIE = "travelbuddy.sid"
SESSION_SECRET = os.getenv("SESSION_SECRET", "a-very-strong-secret-key")


class SessionStore(ABC):
    @abstractmethod
    def create(self, data: dict) -> str:
        """Persist `data` under a new session id and return the id."""

    @abstractmethod
    def get(self, sid: str) -> Optional[dict]:
        ...

    @abstractmethod
    def destroy(self, sid: str) -> None:
        ...


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._sessions: dict[str, dict] = {}

    def create(self, data: dict) -> str:
        sid = secrets.token_hex(24)
        self._sessions[sid] = dict(data)
        return sid

    def get(self, sid: str) -> Optional[dict]:
        return self._sessions.get(sid)

    def destroy(self, sid: str) -> None:
        self._sessions.pop(sid, None)

    def __len__(self) -> int:
        return len(self._sessions)


def _signature(sid: str, secret: str) -> str:
    return hmac.new(secret.encode(), sid.encode(), hashlib.sha256).hexdigest()


def sign(sid: str, secret: str = SESSION_SECRET) -> str:
    return f"{sid}.{_signature(sid, secret)}"


def unsign(value: Optional[str], secret: str = SESSION_SECRET) -> Optional[str]:
    """Return the session id from a cookie value, or None if it was tampered with."""
    if not value or "." not in value:
        return None
    sid, signature = value.rsplit(".", 1)
    if not hmac.compare_digest(signature, _signature(sid, secret)):
        return None
    return sid
