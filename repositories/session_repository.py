# repositories/session_repository.py
from __future__ import annotations
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

from utils.logger import logger_manager

logger = logger_manager.setup_logger(__name__)

DB_PATH = os.getenv("DB_PATH", "./data/session.db")
TOKEN_KEY = "auth_token"

class SessionRepository:
    """
    Session Store: keeps the auth token in a small key/value table so it
    survives restarts until an explicit logout.
    - save() overwrites any previous token.
    - read() returns None when there is no token (never raises on a missing key).
    - clear() removes it.
    """
    def __init__(self, db_path: str = DB_PATH) -> None:
        self.db_path = db_path
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        self._ensure()

    @contextmanager
    def _conn(self):
        conn = sqlite3.connect(self.db_path)
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def _ensure(self) -> None:
        with self._conn() as c:
            c.execute("""
                CREATE TABLE IF NOT EXISTS meta (
                    k TEXT PRIMARY KEY,
                    v TEXT
                )
            """)

    def save(self, token: str) -> None:
        with self._conn() as c:
            c.execute("INSERT OR REPLACE INTO meta (k, v) VALUES (?,?)", (TOKEN_KEY, token))
        logger.info("🔑 Session token stored.")

    def read(self) -> Optional[str]:
        with self._conn() as c:
            r = c.execute("SELECT v FROM meta WHERE k=?", (TOKEN_KEY,)).fetchone()
            return r[0] if r and r[0] else None

    def clear(self) -> None:
        with self._conn() as c:
            c.execute("DELETE FROM meta WHERE k=?", (TOKEN_KEY,))
        logger.info("Session token cleared.")

    def has_session(self) -> bool:
        return self.read() is not None
