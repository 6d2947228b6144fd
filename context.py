"""
Request context: the database, its repositories and the session store.

Handlers receive an AppContext through the `get_context` dependency instead
of reaching for module globals.
"""

from dataclasses import dataclass, field
from typing import Optional

from fastapi import Depends
from pymongo.database import Database

from database import db
from errors import DatabaseNotConfigured
from repository import Repository
from sessions import InMemorySessionStore, SessionStore


@dataclass
class AppContext:
    database: Optional[Database]
    sessions: SessionStore = field(default_factory=InMemorySessionStore)

    def repository(self, collection_name: str) -> Repository:
        return Repository(self.database, collection_name)

    @property
    def users(self) -> Repository:
        return self.repository("user")

    @property
    def drivers(self) -> Repository:
        return self.repository("driver")

    @property
    def admins(self) -> Repository:
        return self.repository("admin")

    @property
    def trips(self) -> Repository:
        return self.repository("trip")

    @property
    def bookings(self) -> Repository:
        return self.repository("booking")

    @property
    def feedback(self) -> Repository:
        return self.repository("feedback")


_context = AppContext(database=db)


def current_context() -> AppContext:
    return _context


def get_context(ctx: AppContext = Depends(current_context)) -> AppContext:
    if ctx.database is None:
        raise DatabaseNotConfigured()
    return ctx


def get_session_store(ctx: AppContext = Depends(current_context)) -> SessionStore:
    return ctx.sessions
