"""Unit tests for the word store backends."""

from unittest.mock import MagicMock, patch

import psycopg2
from psycopg2 import errors
import pytest

from web_dictionary.config import Settings
from web_dictionary.core.exceptions import DuplicateEntry, StoreUnavailable
from web_dictionary.models.dictionary import DictionaryEntry
from web_dictionary.store import MemoryWordStore, PostgresWordStore, escape_like, open_store


class TestMemoryWordStore:
    """Test cases for the MemoryWordStore class."""
    
    @pytest.fixture
    def store(self):
        return MemoryWordStore.from_mapping({
            "catalog": "A list of items.",
            "Cat": "A small feline.",
            "dog": "A domestic canine.",
        })
    
    def test_prefix_is_case_insensitive_and_sorted(self, store):
        entries = store.find_by_prefix("CA")
        
        assert [e.word for e in entries] == ["Cat", "catalog"]
    
    def test_prefix_respects_limit(self, store):
        assert len(store.find_by_prefix("ca", limit=1)) == 1
    
    def test_all_entries(self, store):
        assert {e.word for e in store.all_entries()} == {"catalog", "Cat", "dog"}
        assert store.count() == 3
    
    def test_duplicate_insert_is_case_insensitive(self, store):
        with pytest.raises(DuplicateEntry) as exc_info:
            store.insert(DictionaryEntry(word="CAT", definition="Again."))
        
        assert exc_info.value.word == "CAT"
        assert store.count() == 3
    
    def test_context_manager(self, store):
        with store as handle:
            assert handle.count() == 3


class TestEscapeLike:
    
    def test_wildcards_escaped(self):
        assert escape_like("50%_off") == "50\\%\\_off"
    
    def test_backslash_escaped_first(self):
        assert escape_like("a\\b") == "a\\\\b"
    
    def test_plain_text_untouched(self):
        assert escape_like("cat") == "cat"


class TestPostgresWordStore:
    """Test cases for the PostgresWordStore class against a mocked connection."""
    
    @pytest.fixture
    def connection(self):
        conn = MagicMock()
        conn.closed = 0
        return conn
    
    @pytest.fixture
    def cursor(self, connection):
        cur = MagicMock()
        connection.cursor.return_value.__enter__.return_value = cur
        return cur
    
    def test_connect_enables_autocommit(self, connection):
        with patch("psycopg2.connect", return_value=connection) as connect:
            store = PostgresWordStore.connect({"host": "db", "dbname": "dictionary_db"})
        
        connect.assert_called_once_with(host="db", dbname="dictionary_db")
        assert connection.autocommit is True
        assert isinstance(store, PostgresWordStore)
    
    def test_connect_failure_raises_store_unavailable(self):
        with patch("psycopg2.connect", side_effect=psycopg2.OperationalError("refused")):
            with pytest.raises(StoreUnavailable):
                PostgresWordStore.connect({"host": "db"})
    
    def test_find_by_prefix_uses_escaped_pattern(self, connection, cursor):
        cursor.fetchall.return_value = [("cat", "A small feline."), ("catalog", "A list.")]
        store = PostgresWordStore(connection)
        
        entries = store.find_by_prefix("c_t", limit=10)
        
        sql, params = cursor.execute.call_args[0]
        assert "LOWER(word) LIKE %s" in sql
        assert "ORDER BY word ASC" in sql
        assert params == ("c\\_t%", 10)
        assert [e.word for e in entries] == ["cat", "catalog"]
    
    def test_all_entries(self, connection, cursor):
        cursor.fetchall.return_value = [("dog", "A domestic canine.")]
        store = PostgresWordStore(connection)
        
        entries = store.all_entries()
        
        assert entries == [DictionaryEntry(word="dog", definition="A domestic canine.")]
    
    def test_unique_violation_becomes_duplicate_entry(self, connection, cursor):
        cursor.execute.side_effect = errors.UniqueViolation("duplicate key")
        store = PostgresWordStore(connection)
        
        with pytest.raises(DuplicateEntry):
            store.insert(DictionaryEntry(word="cat", definition="A small feline."))
    
    def test_query_failure_becomes_store_unavailable(self, connection, cursor):
        cursor.execute.side_effect = psycopg2.OperationalError("server closed the connection")
        store = PostgresWordStore(connection)
        
        with pytest.raises(StoreUnavailable):
            store.all_entries()
    
    def test_count(self, connection, cursor):
        cursor.fetchall.return_value = [(42,)]
        
        assert PostgresWordStore(connection).count() == 42
    
    def test_close(self, connection):
        PostgresWordStore(connection).close()
        
        connection.close.assert_called_once()


class TestOpenStore:
    
    def test_memory_backend(self):
        store = open_store(Settings(store_backend="memory"))
        
        assert isinstance(store, MemoryWordStore)
        assert store.count() == 0
    
    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            open_store(Settings(store_backend="mysql"))
