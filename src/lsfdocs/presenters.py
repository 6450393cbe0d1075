"""User-facing text rendering."""

from __future__ import annotations

from .completion import CompletionItem
from .constants import ERROR_PREFIX, WARNING_PREFIX
from .models import RunSummary


def render_error(message: str) -> str:
    return f"{ERROR_PREFIX} {message}"


def render_warning(message: str) -> str:
    return f"{WARNING_PREFIX} {message}"


def render_run_summary(summary: RunSummary) -> list[str]:
    lines = [
        f"Wrote {summary.total_count} command entries to {summary.output_path}",
        f"Enhanced with documentation: {summary.enhanced_count}",
        f"Using basic info (no documentation): {summary.fallback_count}",
        f"Commands with syntax tables: {summary.with_syntax_count}",
        f"Commands with examples: {summary.with_example_count}",
    ]
    lines.extend(
        render_warning(f"Skipped unreadable document: {name}")
        for name in summary.skipped_documents
    )
    return lines


def render_completion_rows(items: list[CompletionItem]) -> list[str]:
    if not items:
        return []
    width = max(len(item.label) for item in items)
    return [f"{item.label:<{width}}  {item.detail}" for item in items]
