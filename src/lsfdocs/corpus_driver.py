"""Generation run: scan the documentation corpus and merge it with the baseline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .constants import DOC_SUFFIX
from .corpus_gateway import (
    list_documents,
    load_baseline,
    read_document,
    write_merged_corpus,
)
from .errors import DocumentError
from .logging_utils import log_event
from .merger import PlaceholderPredicate, merge_corpus, placeholder_predicate
from .models import ExtractedRecord, MergedRecord, ResolvedPaths, RunSummary
from .section_scanner import scan_document


def scan_corpus(
    docs_dir_abs: Path, suffix: str = DOC_SUFFIX
) -> tuple[dict[str, ExtractedRecord], list[str]]:
    """Scan every page in ``docs_dir_abs`` keyed by its filename stem.

    Pages that cannot be read are logged and reported in the second element
    instead of aborting the scan.
    """
    extracted_by_name: dict[str, ExtractedRecord] = {}
    skipped: list[str] = []

    documents = list_documents(docs_dir_abs, suffix)
    for document_path in documents:
        try:
            text = read_document(document_path)
        except DocumentError as exc:
            skipped.append(document_path.name)
            log_event(
                "document_skipped",
                level=logging.WARNING,
                document=document_path,
                error=str(exc),
            )
            continue
        extracted_by_name[document_path.stem] = scan_document(text)

    log_event(
        "docs_scanned",
        docs_dir=docs_dir_abs,
        found=len(documents),
        parsed=len(extracted_by_name),
        skipped=len(skipped),
    )
    return extracted_by_name, skipped


def run_generate(
    resolved_paths: ResolvedPaths,
    *,
    suffix: str = DOC_SUFFIX,
    is_placeholder: PlaceholderPredicate | None = None,
) -> RunSummary:
    if is_placeholder is None:
        is_placeholder = placeholder_predicate()

    log_event(
        "run_start",
        baseline_file=resolved_paths.baseline_file_abs,
        docs_dir=resolved_paths.docs_dir_abs,
        output_file=resolved_paths.output_file_abs,
        suffix=suffix,
    )

    baselines = load_baseline(resolved_paths.baseline_file_abs)
    log_event(
        "baseline_loaded",
        baseline_file=resolved_paths.baseline_file_abs,
        count=len(baselines),
    )

    extracted_by_name, skipped = scan_corpus(resolved_paths.docs_dir_abs, suffix)
    merged, stats = merge_corpus(
        baselines, extracted_by_name, is_placeholder=is_placeholder
    )

    write_merged_corpus(resolved_paths.output_file_abs, merged)
    log_event(
        "output_written",
        output_file=resolved_paths.output_file_abs,
        count=len(merged),
    )

    with_syntax_count, with_example_count = coverage_counts(merged)
    return RunSummary(
        output_path=resolved_paths.output_file_abs,
        total_count=len(merged),
        enhanced_count=stats.enhanced_count,
        fallback_count=stats.fallback_count,
        with_syntax_count=with_syntax_count,
        with_example_count=with_example_count,
        skipped_documents=skipped,
    )


def coverage_counts(records: Sequence[MergedRecord]) -> tuple[int, int]:
    """Return how many records carry a syntax table and an example."""
    with_syntax = sum(1 for record in records if record.syntax)
    with_example = sum(1 for record in records if record.example)
    return with_syntax, with_example
