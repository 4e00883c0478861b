"""Unit tests for the CSV bulk importer."""

import io

import pytest

from web_dictionary import importer
from web_dictionary.config import get_settings
from web_dictionary.importer import import_csv, parse_row
from web_dictionary.core.exceptions import MalformedRow
from web_dictionary.models.dictionary import DictionaryEntry
from web_dictionary.store import MemoryWordStore


class TestParseRow:
    
    def test_fields_are_trimmed(self):
        entry = parse_row(2, ["  cat ", " A small feline. "])
        
        assert entry == DictionaryEntry(word="cat", definition="A small feline.")
    
    def test_extra_columns_ignored(self):
        assert parse_row(2, ["cat", "A small feline.", "noun"]).word == "cat"
    
    @pytest.mark.parametrize("row", [[], ["cat"], ["", "definition"], ["cat", "   "]])
    def test_malformed_rows(self, row):
        with pytest.raises(MalformedRow) as exc_info:
            parse_row(5, row)
        
        assert exc_info.value.row_number == 5


class TestImportCsv:
    """Test cases for import_csv()."""
    
    def test_duplicate_of_existing_word_is_counted(self):
        store = MemoryWordStore.from_mapping({"cat": "A small feline."})
        source = io.StringIO(
            "word,definition\n"
            "dog,A domestic canine.\n"
            "cat,Another definition.\n"
        )
        
        report = import_csv(source, store)
        
        assert report.processed == 2
        assert report.inserted == 1
        assert report.duplicates == 1
        assert store.find_by_prefix("cat")[0].definition == "A small feline."
    
    def test_duplicates_within_file_do_not_abort_batch(self):
        store = MemoryWordStore()
        source = io.StringIO(
            "word,definition\n"
            "cat,A small feline.\n"
            "Cat,Same word, other case.\n"
            "dog,A domestic canine.\n"
        )
        
        report = import_csv(source, store)
        
        assert report.inserted == 2
        assert report.duplicates == 1
        assert store.count() == 2
    
    def test_malformed_rows_skipped(self):
        store = MemoryWordStore()
        source = io.StringIO(
            "word,definition\n"
            "lonely\n"
            ",no word\n"
            "\n"
            "dog,A domestic canine.\n"
        )
        
        report = import_csv(source, store)
        
        assert report.processed == 4
        assert report.skipped == 3
        assert report.inserted == 1
    
    def test_quoted_definitions(self):
        store = MemoryWordStore()
        source = io.StringIO('word,definition\nbat,"A club, or a flying mammal."\n')
        
        import_csv(source, store)
        
        assert store.all_entries()[0].definition == "A club, or a flying mammal."
    
    def test_header_only(self):
        report = import_csv(io.StringIO("word,definition\n"), MemoryWordStore())
        
        assert report.processed == 0
        assert report.inserted == 0
    
    def test_import_from_path(self, tmp_path):
        csv_path = tmp_path / "dictionary.csv"
        csv_path.write_text("\ufeffword,definition\ncat,A small feline.\n", encoding="utf-8")
        store = MemoryWordStore()
        
        report = import_csv(csv_path, store)
        
        assert report.inserted == 1
        assert store.all_entries()[0].word == "cat"


class TestImportCli:
    """Test cases for the web-dictionary-import command."""
    
    @pytest.fixture(autouse=True)
    def postgres_backend(self, monkeypatch):
        monkeypatch.setenv("STORE_BACKEND", "postgres")
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()
    
    @pytest.fixture
    def store(self, monkeypatch):
        """Stand-in for the database connection the command would open."""
        store = MemoryWordStore()
        monkeypatch.setattr(importer, "open_store", lambda settings: store)
        return store
    
    def test_prints_report(self, store, tmp_path, capsys):
        csv_path = tmp_path / "dictionary.csv"
        csv_path.write_text(
            "word,definition\ncat,A small feline.\ndog,A domestic canine.\n",
            encoding="utf-8",
        )
        
        exit_code = importer.main([str(csv_path)])
        
        output = capsys.readouterr().out
        assert exit_code == 0
        assert "Rows processed (header excluded): 2" in output
        assert "Inserted: 2" in output
        assert store.count() == 2
    
    def test_missing_file(self, tmp_path, capsys):
        exit_code = importer.main([str(tmp_path / "missing.csv")])
        
        assert exit_code == 1
        assert "not found" in capsys.readouterr().err
    
    def test_memory_backend_rejected(self, store, tmp_path, monkeypatch, capsys):
        csv_path = tmp_path / "dictionary.csv"
        csv_path.write_text("word,definition\ncat,A small feline.\n", encoding="utf-8")
        monkeypatch.setenv("STORE_BACKEND", "memory")
        get_settings.cache_clear()
        
        exit_code = importer.main([str(csv_path)])
        
        captured = capsys.readouterr()
        assert exit_code == 1
        assert "STORE_BACKEND=memory" in captured.err
        assert "Inserted" not in captured.out
        assert store.count() == 0
