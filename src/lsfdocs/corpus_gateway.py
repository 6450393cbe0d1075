"""File I/O for baseline, documentation pages and the merged corpus."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from .constants import DOC_SUFFIX, OUTPUT_JSON_INDENT
from .errors import (
    BaselineError,
    CommandIndexError,
    DocumentError,
    OutputError,
    StartupValidationError,
)
from .models import BaselineRecord, MergedRecord


def load_baseline(baseline_path_abs: Path) -> list[BaselineRecord]:
    """Read the baseline command collection, preserving its order."""
    payload = _read_json(baseline_path_abs, BaselineError, "baseline")
    if not isinstance(payload, list):
        raise BaselineError(f"Baseline JSON must be an array: {baseline_path_abs}")

    records: list[BaselineRecord] = []
    for index, entry in enumerate(payload):
        if not isinstance(entry, dict):
            raise BaselineError(
                f"Baseline entry {index} must be an object: {baseline_path_abs}"
            )
        try:
            records.append(BaselineRecord.model_validate(entry))
        except ValidationError as exc:
            raise BaselineError(
                f"Baseline entry {index} is invalid ({_first_error(exc)}): "
                f"{baseline_path_abs}"
            ) from exc
    return records


def list_documents(docs_dir_abs: Path, suffix: str = DOC_SUFFIX) -> list[Path]:
    """Return the documentation files directly inside ``docs_dir_abs``."""
    try:
        entries = list(docs_dir_abs.iterdir())
    except OSError as exc:
        raise StartupValidationError(
            f"Failed to list documentation directory: {docs_dir_abs}"
        ) from exc
    documents = [path for path in entries if path.suffix == suffix and path.is_file()]
    return sorted(documents, key=lambda p: p.name)


def read_document(document_path_abs: Path) -> str:
    try:
        return document_path_abs.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentError(f"Failed to read document: {document_path_abs}: {exc}") from exc


def write_merged_corpus(output_path_abs: Path, records: Sequence[MergedRecord]) -> None:
    payload = [record_payload(record) for record in records]
    try:
        output_path_abs.parent.mkdir(parents=True, exist_ok=True)
        output_path_abs.write_text(
            f"{json.dumps(payload, ensure_ascii=False, indent=OUTPUT_JSON_INDENT)}\n",
            encoding="utf-8",
        )
    except OSError as exc:
        raise OutputError(f"Failed to write merged corpus: {output_path_abs}") from exc


def record_payload(record: MergedRecord) -> dict[str, Any]:
    """Serialize a record, leaving out a category the baseline never had."""
    payload = record.model_dump(mode="json")
    if "category" not in record.model_fields_set:
        del payload["category"]
    return payload


def read_merged_corpus(data_path_abs: Path) -> list[MergedRecord]:
    payload = _read_json(data_path_abs, CommandIndexError, "command data")
    if not isinstance(payload, list):
        raise CommandIndexError(f"Command data JSON must be an array: {data_path_abs}")
    try:
        return [MergedRecord.model_validate(entry) for entry in payload]
    except ValidationError as exc:
        raise CommandIndexError(
            f"Command data is invalid ({_first_error(exc)}): {data_path_abs}"
        ) from exc


def _read_json(path: Path, error_type: type[Exception], label: str) -> Any:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise error_type(f"Failed to read {label} file: {path}") from exc

    try:
        return json.loads(raw_text)
    except json.JSONDecodeError as exc:
        raise error_type(f"Invalid {label} JSON: {path}") from exc


def _first_error(exc: ValidationError) -> str:
    error = exc.errors()[0]
    location = ".".join(str(part) for part in error["loc"])
    return f"{location}: {error['msg']}" if location else error["msg"]
