"""Combine baseline command records with extracted documentation."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .constants import DEFAULT_PLACEHOLDER_PREFIX
from .logging_utils import log_event
from .models import (
    BaselineRecord,
    ExtractedRecord,
    MergedRecord,
    MergeStats,
    SyntaxRow,
)

# (description, command name) -> True when the description is only the
# generated default for that command.
PlaceholderPredicate = Callable[[str, str], bool]


def placeholder_predicate(prefix: str = DEFAULT_PLACEHOLDER_PREFIX) -> PlaceholderPredicate:
    def _is_placeholder(description: str, name: str) -> bool:
        return description == f"{prefix}: {name}"

    return _is_placeholder


def merge_record(
    baseline: BaselineRecord,
    extracted: ExtractedRecord | None,
    *,
    is_placeholder: PlaceholderPredicate,
) -> MergedRecord:
    fields = _baseline_fields(baseline)

    if extracted is None:
        fields.update(
            markdown=synthesize_markdown(baseline),
            summary=baseline.description,
            syntax=(SyntaxRow(syntax=baseline.usage, description=baseline.description),),
            example="",
        )
        return MergedRecord(**fields)

    fields.update(
        markdown=extracted.body,
        summary=extracted.summary,
        syntax=extracted.syntax_rows,
        example=extracted.example,
    )
    if extracted.description and not is_placeholder(extracted.description, baseline.name):
        fields["description"] = extracted.description
    return MergedRecord(**fields)


def merge_corpus(
    baselines: Iterable[BaselineRecord],
    extracted_by_name: Mapping[str, ExtractedRecord],
    *,
    is_placeholder: PlaceholderPredicate,
) -> tuple[list[MergedRecord], MergeStats]:
    """Merge every baseline entry, in order, with its extracted document."""
    merged: list[MergedRecord] = []
    enhanced_count = 0
    fallback_count = 0

    for baseline in baselines:
        extracted = extracted_by_name.get(baseline.name)
        if extracted is None:
            fallback_count += 1
        else:
            enhanced_count += 1
        merged.append(merge_record(baseline, extracted, is_placeholder=is_placeholder))

    stats = MergeStats(enhanced_count=enhanced_count, fallback_count=fallback_count)
    log_event(
        "merge_complete",
        total=len(merged),
        enhanced=stats.enhanced_count,
        fallback=stats.fallback_count,
    )
    return merged, stats


def baseline_only_record(baseline: BaselineRecord) -> MergedRecord:
    """Shape a baseline entry as a merged record with no documentation."""
    fields = _baseline_fields(baseline)
    fields.update(markdown="", summary=baseline.description, syntax=(), example="")
    return MergedRecord(**fields)


def synthesize_markdown(baseline: BaselineRecord) -> str:
    return (
        f"### {baseline.name}\n\n"
        f"{baseline.description}\n\n"
        f"**Usage:** `{baseline.usage}`"
    )


def _baseline_fields(baseline: BaselineRecord) -> dict[str, Any]:
    fields = baseline.model_dump()
    if "category" not in baseline.model_fields_set:
        del fields["category"]
    return fields
