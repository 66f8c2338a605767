"""SQLite schema for the collaboration inbox.

Provides ``init_db`` which opens the database in WAL mode with foreign keys
enforced and creates the four tables the core persists: influencers,
negotiation policies, inquiries, and chat messages.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path


def init_db(db_path: Path | str) -> sqlite3.Connection:
    """Create and initialize the database with WAL mode and indexes.

    The connection is opened with ``check_same_thread=False`` because the
    async service layer runs store calls through ``asyncio.to_thread``; the
    store serializes access with its own lock.

    Args:
        db_path: Path to the SQLite database file, or ``":memory:"``.

    Returns:
        An open sqlite3.Connection with all tables created.
    """
    conn = sqlite3.connect(str(db_path), check_same_thread=False)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    init_tables(conn)
    return conn


def init_tables(conn: sqlite3.Connection) -> None:
    """Create all tables and indexes if they do not already exist.

    Args:
        conn: An open sqlite3.Connection.
    """
    conn.execute("""
        CREATE TABLE IF NOT EXISTS influencers (
            id TEXT PRIMARY KEY,
            username TEXT UNIQUE,
            email TEXT,
            first_name TEXT,
            last_name TEXT,
            profile_image_url TEXT,
            language TEXT NOT NULL DEFAULT 'en',
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """)

    conn.execute("""
        CREATE TABLE IF NOT EXISTS negotiation_policies (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            influencer_id TEXT NOT NULL UNIQUE
                REFERENCES influencers (id) ON DELETE CASCADE,
            content_preferences TEXT NOT NULL,
            minimum_rate INTEGER NOT NULL CHECK (minimum_rate > 0),
            preferred_content_length TEXT NOT NULL,
            additional_guidelines TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """)

    conn.execute("""
        CREATE TABLE IF NOT EXISTS inquiries (
            id TEXT PRIMARY KEY,
            influencer_id TEXT NOT NULL
                REFERENCES influencers (id) ON DELETE CASCADE,
            business_email TEXT NOT NULL,
            message TEXT NOT NULL,
            price INTEGER,
            company_info TEXT,
            attachment_url TEXT,
            status TEXT NOT NULL DEFAULT 'pending'
                CHECK (status IN ('pending', 'approved', 'rejected', 'needs_info')),
            chat_active INTEGER NOT NULL DEFAULT 1,
            ai_response TEXT,
            ai_recommendation TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
    """)

    conn.execute("""
        CREATE TABLE IF NOT EXISTS messages (
            seq INTEGER PRIMARY KEY AUTOINCREMENT,
            id TEXT NOT NULL UNIQUE,
            inquiry_id TEXT NOT NULL
                REFERENCES inquiries (id) ON DELETE CASCADE,
            role TEXT NOT NULL CHECK (role IN ('system', 'user', 'assistant')),
            content TEXT NOT NULL,
            created_at TEXT NOT NULL
        )
    """)

    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_inquiries_influencer ON inquiries (influencer_id)"
    )
    conn.execute(
        "CREATE INDEX IF NOT EXISTS idx_messages_inquiry ON messages (inquiry_id, created_at)"
    )

    conn.commit()


def close_db(conn: sqlite3.Connection) -> None:
    """Close the database connection.

    Args:
        conn: The database connection to close.
    """
    conn.close()
