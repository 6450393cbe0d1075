"""Name-keyed lookup over generated command data.

The index loads the merged corpus once and serves lookups from memory. When
the generated file is missing or unreadable it falls back to the raw baseline
collection, shaping each entry as a record without documentation.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .corpus_gateway import load_baseline, read_merged_corpus
from .errors import BaselineError, CommandIndexError
from .logging_utils import log_event
from .merger import baseline_only_record
from .models import MergedRecord


class CommandIndex:
    def __init__(self, data_path: Path, baseline_path: Path | None = None) -> None:
        self.data_path = data_path
        self.baseline_path = baseline_path
        self._records: dict[str, MergedRecord] = {}
        self._loaded = False
        self.source: str | None = None

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self) -> bool:
        """Load command data; return False when no source could be read."""
        if self._loaded:
            return True

        if not self.data_path.exists():
            log_event(
                "index_fallback",
                level=logging.WARNING,
                data_file=self.data_path,
                reason="generated command data not found",
            )
            return self._load_fallback()

        try:
            records = read_merged_corpus(self.data_path)
        except CommandIndexError as exc:
            log_event(
                "index_fallback",
                level=logging.WARNING,
                data_file=self.data_path,
                reason=str(exc),
            )
            return self._load_fallback()

        self._store(records, source="generated")
        return True

    def _load_fallback(self) -> bool:
        if self.baseline_path is None:
            log_event(
                "index_load_failed",
                level=logging.ERROR,
                data_file=self.data_path,
                error="no baseline configured",
            )
            return False

        try:
            baselines = load_baseline(self.baseline_path)
        except BaselineError as exc:
            log_event(
                "index_load_failed",
                level=logging.ERROR,
                data_file=self.data_path,
                baseline_file=self.baseline_path,
                error=str(exc),
            )
            return False

        self._store([baseline_only_record(b) for b in baselines], source="baseline")
        return True

    def _store(self, records: list[MergedRecord], *, source: str) -> None:
        self._records = {record.name: record for record in records}
        self._loaded = True
        self.source = source
        log_event(
            "index_loaded",
            source=source,
            data_file=self.data_path if source == "generated" else self.baseline_path,
            count=len(self._records),
        )

    def lookup(self, name: str) -> MergedRecord | None:
        self._ensure_loaded()
        return self._records.get(name)

    def has(self, name: str) -> bool:
        self._ensure_loaded()
        return name in self._records

    def all_names(self) -> list[str]:
        self._ensure_loaded()
        return list(self._records)

    def count(self) -> int:
        self._ensure_loaded()
        return len(self._records)

    def reset(self) -> None:
        """Drop loaded data so the next access reloads from disk."""
        self._records = {}
        self._loaded = False
        self.source = None

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()
