"""
SQLite database integration and simple migration system.

The ``Database`` object is built once at startup from ``Settings`` and
stored on ``app.state``; handlers obtain it through the ``get_db``
dependency.  Every service call opens a *unit of work* with
``Database.unit_of_work()`` and issues parameterized SQL through the
returned ``Store``.

By default each write commits immediately (autocommit per statement),
so a service method that performs several writes is not atomic.  When
``atomic_writes`` is enabled the whole unit runs inside one
``BEGIN IMMEDIATE`` transaction and is rolled back on error.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence

from fastapi import Request

from .errors import BadRequestError

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent


def resolve_path(path: str) -> str:
    """Return ``path`` unchanged if absolute, else resolve it against the project root."""
    if os.path.isabs(path):
        return path
    return str((PROJECT_ROOT / path).resolve())


MIGRATIONS: List[tuple] = [
    # Migration 1: initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            user_id INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL UNIQUE,
            email TEXT NOT NULL UNIQUE,
            password TEXT NOT NULL,
            role TEXT NOT NULL DEFAULT 'user',
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        );

        CREATE TABLE IF NOT EXISTS medias (
            id_media INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER,
            filename TEXT,
            filetype TEXT,
            filepath TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(user_id)
        );

        CREATE TABLE IF NOT EXISTS post_txt (
            post_txt_id INTEGER PRIMARY KEY AUTOINCREMENT,
            text TEXT NOT NULL,
            description TEXT NOT NULL,
            user_id INTEGER NOT NULL,
            username TEXT NOT NULL,
            likes INTEGER NOT NULL DEFAULT 0 CHECK (likes >= 0),
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(user_id) REFERENCES users(user_id)
        );

        CREATE TABLE IF NOT EXISTS post_media (
            post_media_id INTEGER PRIMARY KEY AUTOINCREMENT,
            id_media INTEGER NOT NULL,
            description TEXT NOT NULL,
            user_id INTEGER NOT NULL,
            username TEXT NOT NULL,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            FOREIGN KEY(id_media) REFERENCES medias(id_media),
            FOREIGN KEY(user_id) REFERENCES users(user_id)
        );

        CREATE TABLE IF NOT EXISTS articles (
            id_article INTEGER PRIMARY KEY AUTOINCREMENT,
            titre TEXT NOT NULL,
            description TEXT NOT NULL,
            corps TEXT NOT NULL,
            sport TEXT NOT NULL,
            date TEXT NOT NULL,
            id_media INTEGER,
            auteur TEXT,
            FOREIGN KEY(id_media) REFERENCES medias(id_media)
        );

        CREATE TABLE IF NOT EXISTS events (
            id_event INTEGER PRIMARY KEY AUTOINCREMENT,
            user_id INTEGER NOT NULL,
            username TEXT NOT NULL,
            name TEXT NOT NULL,
            date TEXT NOT NULL,
            lieu TEXT NOT NULL,
            sport TEXT NOT NULL,
            genre TEXT NOT NULL,
            nb_participants_max INTEGER NOT NULL,
            description TEXT NOT NULL,
            id_media INTEGER,
            FOREIGN KEY(user_id) REFERENCES users(user_id),
            FOREIGN KEY(id_media) REFERENCES medias(id_media)
        );

        CREATE TABLE IF NOT EXISTS event_participants (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            event_id INTEGER NOT NULL,
            user_id INTEGER NOT NULL,
            joined_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            UNIQUE(event_id, user_id),
            FOREIGN KEY(user_id) REFERENCES users(user_id)
        );

        CREATE TABLE IF NOT EXISTS sports (
            id_sport INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            description TEXT
        );

        CREATE TABLE IF NOT EXISTS profil (
            id_profil INTEGER PRIMARY KEY AUTOINCREMENT,
            username TEXT NOT NULL,
            photo_profil INTEGER,
            sports_pratiques TEXT,
            sports_suivis TEXT,
            FOREIGN KEY(photo_profil) REFERENCES medias(id_media)
        );
        """,
    ),
    # Migration 2: lookup indices
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_medias_user_id ON medias(user_id);
        CREATE INDEX IF NOT EXISTS idx_event_participants_event_id ON event_participants(event_id);
        CREATE INDEX IF NOT EXISTS idx_profil_username ON profil(username);
        """,
    ),
]

# Static sport taxonomy, inserted with INSERT OR IGNORE on every start.
DEFAULT_SPORTS = [
    ("Football", "Team sport played with a ball and two goals"),
    ("Basketball", "Team sport played on a court with two hoops"),
    ("Tennis", "Racket sport played singles or doubles"),
    ("Running", "Road, trail and track running"),
    ("Cycling", "Road, track and mountain biking"),
    ("Swimming", "Pool and open water swimming"),
    ("Volleyball", "Indoor and beach volleyball"),
    ("Rugby", "Rugby union and rugby league"),
    ("Handball", "Team sport played with the hands and two goals"),
    ("Climbing", "Bouldering, lead and outdoor climbing"),
]


class Store:
    """Narrow query interface over one SQLite connection.

    ``fetch_one`` and ``fetch_all`` return rows as plain dicts so they
    can be handed to pydantic models or JSON responses unchanged.
    ``execute`` returns the cursor so callers can read ``lastrowid`` and
    ``rowcount``.

    SQLite integers are 64-bit.  A lookup bound to a larger value can
    match nothing, so the fetch methods answer "no row"; a write with
    such a value is rejected as bad input.
    """

    def __init__(self, conn: sqlite3.Connection, autocommit: bool) -> None:
        self._conn = conn
        self._autocommit = autocommit

    def fetch_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        try:
            row = self._conn.execute(sql, tuple(params)).fetchone()
        except OverflowError:
            logger.info("Lookup with out-of-range integer: %s", params)
            return None
        return dict(row) if row is not None else None

    def fetch_all(self, sql: str, params: Sequence[Any] = ()) -> List[dict]:
        try:
            rows = self._conn.execute(sql, tuple(params)).fetchall()
        except OverflowError:
            logger.info("Lookup with out-of-range integer: %s", params)
            return []
        return [dict(row) for row in rows]

    def execute(self, sql: str, params: Sequence[Any] = ()) -> sqlite3.Cursor:
        try:
            cursor = self._conn.execute(sql, tuple(params))
        except OverflowError as exc:
            raise BadRequestError("Integer value out of range") from exc
        if self._autocommit:
            self._conn.commit()
        return cursor


class Database:
    """Factory for SQLite connections and units of work."""

    def __init__(self, path: str, atomic_writes: bool = False) -> None:
        self.path = resolve_path(path)
        self.atomic_writes = atomic_writes

    def get_connection(self) -> sqlite3.Connection:
        """Create and return a new SQLite connection.

        Rows are returned as ``sqlite3.Row`` so columns can be accessed
        by name, and foreign key enforcement is turned on for the
        lifetime of the connection.
        """
        conn = sqlite3.connect(self.path)
        conn.row_factory = sqlite3.Row
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @contextmanager
    def get_cursor(self) -> Iterator[sqlite3.Cursor]:
        """Context manager that yields a cursor and closes the connection on exit."""
        conn = self.get_connection()
        try:
            yield conn.cursor()
            conn.commit()
        finally:
            conn.close()

    @contextmanager
    def unit_of_work(self) -> Iterator[Store]:
        """Yield a ``Store`` for one service call.

        Without ``atomic_writes`` every statement commits on its own.
        With it, the unit runs in a single immediate transaction that is
        committed on success and rolled back on any exception.
        """
        conn = self.get_connection()
        try:
            if not self.atomic_writes:
                yield Store(conn, autocommit=True)
                return
            conn.isolation_level = None
            conn.execute("BEGIN IMMEDIATE")
            try:
                yield Store(conn, autocommit=False)
            except BaseException:
                conn.execute("ROLLBACK")
                raise
            conn.execute("COMMIT")
        finally:
            conn.close()

    def init_db(self) -> None:
        """Initialise the database and apply pending migrations.

        Creates the ``migrations`` table if it does not exist, checks the
        current schema version, applies any newer entries of
        ``MIGRATIONS`` and seeds the sport taxonomy.
        """
        Path(self.path).parent.mkdir(parents=True, exist_ok=True)
        with self.get_cursor() as cursor:
            cursor.execute("CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)")
            cursor.execute("SELECT MAX(version) AS version FROM migrations")
            row = cursor.fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %s", version)
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version

            cursor.executemany(
                "INSERT OR IGNORE INTO sports (name, description) VALUES (?, ?)",
                DEFAULT_SPORTS,
            )


def get_db(request: Request) -> Database:
    """FastAPI dependency returning the database the app was built with."""
    return request.app.state.db
