"""Two-column syntax table parsing for pipe-delimited Markdown tables."""

from __future__ import annotations

from collections.abc import Sequence

from .constants import BOLD_MARKER, TABLE_ROW_MARKER
from .models import SyntaxRow

# Header row plus separator row.
_TABLE_PREAMBLE_ROWS = 2


def is_table_row(line: str) -> bool:
    return line.strip().startswith(TABLE_ROW_MARKER)


def find_table_block(lines: Sequence[str], start: int) -> tuple[list[str] | None, int]:
    """Locate the first run of pipe-prefixed lines at or after ``start``.

    Returns the run and the index just past it, or ``(None, start)`` when no
    table row exists in the remaining lines.
    """
    index = start
    while index < len(lines) and not is_table_row(lines[index]):
        index += 1
    if index >= len(lines):
        return None, start

    block: list[str] = []
    while index < len(lines) and is_table_row(lines[index]):
        block.append(lines[index])
        index += 1
    return block, index


def parse_syntax_table(table_lines: Sequence[str]) -> tuple[SyntaxRow, ...]:
    """Interpret table lines as (syntax, description) rows.

    The first two lines are the header and separator. Data rows with fewer
    than two non-empty cells are skipped; extra cells are ignored.
    """
    if len(table_lines) < _TABLE_PREAMBLE_ROWS:
        return ()

    rows: list[SyntaxRow] = []
    for line in table_lines[_TABLE_PREAMBLE_ROWS:]:
        cells = _split_cells(line)
        if len(cells) < 2:
            continue
        rows.append(
            SyntaxRow(
                syntax=_strip_bold(cells[0]),
                description=_strip_bold(cells[1]),
            )
        )
    return tuple(rows)


def _split_cells(line: str) -> list[str]:
    return [cell.strip() for cell in line.split(TABLE_ROW_MARKER) if cell.strip()]


def _strip_bold(text: str) -> str:
    return text.replace(BOLD_MARKER, "").strip()
