"""Bulk import of word/definition pairs from a CSV file."""

import argparse
import csv
import io
import sys
from pathlib import Path
from typing import Iterable, List, Optional, TextIO, Union

import structlog

from .config import get_settings
from .core.exceptions import DictionaryError, DuplicateEntry, MalformedRow
from .logging_config import configure_logging
from .models.dictionary import DictionaryEntry
from .models.response import ImportReport
from .store import WordStore, PostgresWordStore, open_store

logger = structlog.get_logger(__name__)


def parse_row(row_number: int, row: List[str]) -> DictionaryEntry:
    """
    Turn a CSV row into an entry.
    
    Raises:
        MalformedRow: Fewer than two columns, or a blank word or definition
    """
    if len(row) < 2:
        raise MalformedRow(row_number, "fewer than 2 columns")
    
    word = row[0].strip()
    definition = row[1].strip()
    if not word or not definition:
        raise MalformedRow(row_number, "empty word or definition")
    
    return DictionaryEntry(word=word, definition=definition)


def import_rows(rows: Iterable[List[str]], store: WordStore) -> ImportReport:
    """
    Insert rows into the store, skipping the first (header) row.
    
    Malformed rows and duplicates are counted and skipped; the batch always
    runs to the end.
    """
    report = ImportReport()
    
    for row_number, row in enumerate(rows, start=1):
        if row_number == 1:
            logger.info("Skipping header row", header=row)
            continue
        
        report.processed += 1
        
        try:
            entry = parse_row(row_number, row)
        except MalformedRow as e:
            report.skipped += 1
            logger.warning("Malformed row skipped", row=e.row_number, reason=e.reason)
            continue
        
        try:
            store.insert(entry)
        except DuplicateEntry:
            report.duplicates += 1
            logger.warning("Duplicate word skipped", row=row_number, word=entry.word)
            continue
        except DictionaryError as e:
            report.failed += 1
            logger.error("Insert failed", row=row_number, word=entry.word, error=str(e))
            continue
        
        report.inserted += 1
        logger.debug("Inserted", word=entry.word)
    
    logger.info("Import finished", **report.model_dump())
    return report


def import_csv(source: Union[str, Path, TextIO], store: WordStore) -> ImportReport:
    """
    Import a two-column ``word,definition`` CSV file with a header row.
    
    Args:
        source: Path to the CSV file, or an open text stream
        store: Open store handle to insert into
        
    Returns:
        Counts of processed, inserted, duplicate, skipped and failed rows
    """
    if isinstance(source, io.TextIOBase):
        return import_rows(csv.reader(source), store)
    
    logger.info("Importing CSV", path=str(source))
    with open(source, mode="r", encoding="utf-8-sig", newline="") as csv_file:
        return import_rows(csv.reader(csv_file), store)


def format_report(report: ImportReport) -> str:
    """Human-readable import summary."""
    return "\n".join([
        "--- Import report ---",
        f"Rows processed (header excluded): {report.processed}",
        f"Inserted: {report.inserted}",
        f"Duplicates: {report.duplicates}",
        f"Malformed rows skipped: {report.skipped}",
        f"Failed: {report.failed}",
    ])


def main(argv: Optional[List[str]] = None) -> int:
    """Command-line entry point for ``web-dictionary-import``."""
    parser = argparse.ArgumentParser(
        description="Import a word,definition CSV file into the dictionary store."
    )
    parser.add_argument("csv_file", help="CSV file with a word,definition header row")
    parser.add_argument(
        "--create-schema",
        action="store_true",
        help="Create the words table before importing",
    )
    args = parser.parse_args(argv)
    
    settings = get_settings()
    configure_logging(settings.log_level, settings.log_format)
    
    if settings.store_backend == "memory":
        print(
            "Error: STORE_BACKEND=memory keeps nothing after the command exits; "
            "configure the PostgreSQL backend to import.",
            file=sys.stderr,
        )
        return 1
    
    csv_path = Path(args.csv_file)
    if not csv_path.is_file():
        print(f"Error: CSV file '{csv_path}' not found.", file=sys.stderr)
        return 1
    
    with open_store(settings) as store:
        if args.create_schema and isinstance(store, PostgresWordStore):
            store.ensure_schema()
        report = import_csv(csv_path, store)
    
    print(format_report(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
