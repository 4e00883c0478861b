"""PostgreSQL word store using psycopg2."""

from typing import Any, Dict, List

import psycopg2
from psycopg2 import errors
import structlog

from ..core.exceptions import DuplicateEntry, StoreUnavailable
from ..models.dictionary import DictionaryEntry
from .base import WordStore

logger = structlog.get_logger(__name__)

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS words (
    id SERIAL PRIMARY KEY,
    word TEXT NOT NULL UNIQUE,
    definition TEXT NOT NULL
);
CREATE UNIQUE INDEX IF NOT EXISTS words_word_lower_idx ON words (LOWER(word));
"""

PREFIX_SQL = (
    "SELECT word, definition FROM words "
    "WHERE LOWER(word) LIKE %s ESCAPE '\\' "
    "ORDER BY word ASC LIMIT %s"
)
ALL_SQL = "SELECT word, definition FROM words"
INSERT_SQL = "INSERT INTO words (word, definition) VALUES (%s, %s)"
COUNT_SQL = "SELECT COUNT(*) FROM words"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so the value matches literally."""
    return (
        value.replace("\\", "\\\\")
        .replace("%", "\\%")
        .replace("_", "\\_")
    )


class PostgresWordStore(WordStore):
    """Word store over a single psycopg2 connection, owned by one request."""
    
    def __init__(self, connection) -> None:
        self._conn = connection
    
    @classmethod
    def connect(cls, db_config: Dict[str, Any]) -> "PostgresWordStore":
        """
        Open a connection to the dictionary database.
        
        Args:
            db_config: Keyword arguments for psycopg2.connect()
            
        Raises:
            StoreUnavailable: The database could not be reached
        """
        try:
            conn = psycopg2.connect(**db_config)
        except psycopg2.Error as e:
            logger.error("Database connection failed", host=db_config.get("host"), error=str(e))
            raise StoreUnavailable("Could not connect to the word store") from e
        
        # Each statement commits on its own so a duplicate insert never
        # poisons the rest of an import batch.
        conn.autocommit = True
        return cls(conn)
    
    def ensure_schema(self) -> None:
        """Create the words table if it does not exist."""
        self._execute(SCHEMA_SQL)
    
    def find_by_prefix(self, prefix: str, limit: int = 10) -> List[DictionaryEntry]:
        rows = self._fetchall(PREFIX_SQL, (escape_like(prefix) + "%", limit))
        return [DictionaryEntry(word=word, definition=definition) for word, definition in rows]
    
    def all_entries(self) -> List[DictionaryEntry]:
        rows = self._fetchall(ALL_SQL)
        return [DictionaryEntry(word=word, definition=definition) for word, definition in rows]
    
    def insert(self, entry: DictionaryEntry) -> None:
        try:
            with self._conn.cursor() as cur:
                cur.execute(INSERT_SQL, (entry.word, entry.definition))
        except errors.UniqueViolation as e:
            raise DuplicateEntry(entry.word) from e
        except psycopg2.Error as e:
            logger.error("Insert failed", word=entry.word, error=str(e))
            raise StoreUnavailable("Insert into the word store failed") from e
    
    def count(self) -> int:
        rows = self._fetchall(COUNT_SQL)
        return rows[0][0]
    
    def close(self) -> None:
        if self._conn is not None and not self._conn.closed:
            self._conn.close()
    
    def _execute(self, sql: str, params: tuple = ()) -> None:
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
        except psycopg2.Error as e:
            logger.error("Query execution failed", error=str(e))
            raise StoreUnavailable("Word store query failed") from e
    
    def _fetchall(self, sql: str, params: tuple = ()) -> List[tuple]:
        try:
            with self._conn.cursor() as cur:
                cur.execute(sql, params)
                return cur.fetchall()
        except psycopg2.Error as e:
            logger.error("Query execution failed", error=str(e))
            raise StoreUnavailable("Word store query failed") from e
