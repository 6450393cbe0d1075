"""Heuristic section extraction for command documentation pages.

A page is expected to read title, description, syntax table, example and an
optional trailing related-links block, in that order. Each zone is located by
its own forward search, so a missing zone yields an empty value instead of
derailing the zones after it. Scanning never raises on malformed input.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .constants import (
    CODE_FENCE,
    EXAMPLE_MARKER,
    HEADING_MARKER,
    RELATED_LINKS_PHRASE,
    RELATED_LINKS_PREFIXES,
    SUMMARY_ELLIPSIS,
    SUMMARY_MAX_CHARS,
)
from .models import ExtractedRecord
from .table_parser import find_table_block, is_table_row, parse_syntax_table

_HEADING_PREFIX_RE = re.compile(rf"^{re.escape(HEADING_MARKER)}+\s*")


def _build_related_links_re(
    prefixes: Sequence[str], phrase: str
) -> re.Pattern[str]:
    escaped = re.escape(phrase)
    alternatives = [rf"(?:{prefix})[ \t]*{escaped}" for prefix in prefixes]
    alternatives.append(rf"^[ \t]*{escaped}[ \t]*:?[ \t]*\r?$")
    return re.compile("|".join(alternatives), re.IGNORECASE | re.MULTILINE)


_RELATED_LINKS_RE = _build_related_links_re(RELATED_LINKS_PREFIXES, RELATED_LINKS_PHRASE)


def scan_document(text: str) -> ExtractedRecord:
    lines = text.splitlines()

    title, cursor = find_title(lines, 0)
    description, cursor = read_description(lines, cursor)

    table_lines, table_end = find_table_block(lines, cursor)
    syntax_rows = parse_syntax_table(table_lines) if table_lines is not None else ()
    if table_lines is not None:
        cursor = table_end

    example, _ = find_example(lines, cursor)

    return ExtractedRecord(
        title=title,
        description=description,
        summary=derive_summary(description, title),
        syntax_rows=syntax_rows,
        example=example,
        body=cut_trailing_section(text),
    )


def find_title(lines: Sequence[str], start: int) -> tuple[str, int]:
    index = start
    while index < len(lines):
        stripped = lines[index].strip()
        if stripped.startswith(HEADING_MARKER):
            return _HEADING_PREFIX_RE.sub("", stripped).strip(), index + 1
        index += 1
    return "", start


def read_description(lines: Sequence[str], start: int) -> tuple[str, int]:
    """Join the first prose paragraph at or after ``start``.

    Leading blank lines are skipped. The paragraph ends at a blank line, a
    table row, a code fence or the example label.
    """
    index = start
    while index < len(lines) and not lines[index].strip():
        index += 1

    collected: list[str] = []
    while index < len(lines):
        stripped = lines[index].strip()
        if _ends_description(stripped):
            break
        collected.append(stripped)
        index += 1
    return " ".join(collected), index


def _ends_description(stripped: str) -> bool:
    return (
        not stripped
        or is_table_row(stripped)
        or stripped.startswith(CODE_FENCE)
        or stripped.startswith(EXAMPLE_MARKER)
    )


def derive_summary(description: str, title: str) -> str:
    if not description:
        return title
    first_sentence = description.split(".", 1)[0]
    if not first_sentence.strip():
        # Description opens with a period, e.g. ".mat files ...".
        first_sentence = title or description
    if len(first_sentence) > SUMMARY_MAX_CHARS:
        return first_sentence[:SUMMARY_MAX_CHARS] + SUMMARY_ELLIPSIS
    return first_sentence


def find_example(lines: Sequence[str], start: int) -> tuple[str, int]:
    """Capture the fenced code block that follows the example label.

    Returns ``("", start)`` unless the label, an opening fence and a closing
    fence are all present.
    """
    index = start
    while index < len(lines) and EXAMPLE_MARKER not in lines[index]:
        index += 1
    if index >= len(lines):
        return "", start

    index += 1
    while index < len(lines) and not lines[index].strip().startswith(CODE_FENCE):
        index += 1
    if index >= len(lines):
        return "", start

    index += 1
    code_lines: list[str] = []
    while index < len(lines):
        if lines[index].strip().startswith(CODE_FENCE):
            return "\n".join(code_lines).strip(), index + 1
        code_lines.append(lines[index])
        index += 1
    return "", start


def find_related_links(text: str) -> int | None:
    match = _RELATED_LINKS_RE.search(text)
    if match is None:
        return None
    return match.start()


def cut_trailing_section(text: str) -> str:
    cut_at = find_related_links(text)
    if cut_at is None:
        return text
    return text[:cut_at].strip()
