"""Persistence package.

Provides the SQLite schema and the ``CollabStore`` repository used by the
inquiry service.
"""

from collabdesk.state.schema import close_db, init_db, init_tables
from collabdesk.state.store import CollabStore

__all__ = [
    "CollabStore",
    "close_db",
    "init_db",
    "init_tables",
]
