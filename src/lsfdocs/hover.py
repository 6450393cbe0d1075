"""Hover text rendering for command records."""

from __future__ import annotations

from .command_index import CommandIndex
from .constants import CODE_FENCE, HOVER_CODE_LANGUAGE
from .models import MergedRecord


def render_hover_markdown(record: MergedRecord) -> str:
    """Return Markdown hover text for a command.

    Generated documentation is used verbatim. Records without it get a
    compact page built from their baseline fields, syntax rows and example.
    """
    if record.markdown:
        return record.markdown

    parts = [f"### {record.name}\n\n"]
    if record.description:
        parts.append(f"{record.description}\n\n")
    if record.usage:
        parts.append(f"**Usage:** `{record.usage}`\n\n")
    if record.category:
        parts.append(f"**Category:** {record.category}\n")

    if record.syntax:
        parts.append("\n**Syntax:**\n\n")
        parts.append("| Syntax | Description |\n")
        parts.append("|--------|-------------|\n")
        for row in record.syntax:
            parts.append(f"| `{row.syntax}` | {row.description} |\n")
        parts.append("\n")

    if record.example:
        parts.append("**Example:**\n\n")
        parts.append(f"{CODE_FENCE}{HOVER_CODE_LANGUAGE}\n{record.example}\n{CODE_FENCE}\n")

    return "".join(parts)


def hover_for_word(index: CommandIndex, word: str) -> str | None:
    if not word:
        return None
    record = index.lookup(word)
    if record is None:
        return None
    return render_hover_markdown(record)
