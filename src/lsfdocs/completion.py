"""Command-name completion over a CommandIndex."""

from __future__ import annotations

from dataclasses import dataclass

from .command_index import CommandIndex
from .constants import DEFAULT_COMPLETION_DETAIL
from .models import MergedRecord


@dataclass(frozen=True)
class CompletionItem:
    label: str
    detail: str
    insert_text: str
    documentation: str | None = None


def should_suggest_commands(line_prefix: str) -> bool:
    """Decide whether command names make sense at the cursor.

    No suggestions after a statement terminator or inside a comment.
    """
    trimmed = line_prefix.rstrip()
    if not trimmed:
        return True
    if trimmed.endswith(";"):
        return False
    if "#" in trimmed:
        return False
    return True


def complete(index: CommandIndex, line_prefix: str, word: str = "") -> list[CompletionItem]:
    if not should_suggest_commands(line_prefix):
        return []

    needle = word.lower()
    return [
        completion_item(name, index.lookup(name))
        for name in index.all_names()
        if name.lower().startswith(needle)
    ]


def completion_item(name: str, record: MergedRecord | None) -> CompletionItem:
    if record is not None and record.summary:
        detail = record.summary
    elif record is not None and record.description:
        detail = record.description
    else:
        detail = DEFAULT_COMPLETION_DETAIL

    documentation = None
    if record is not None and record.markdown:
        documentation = f"**{name}**\n\n"
        if record.summary:
            documentation += f"{record.summary}\n\n"
        if record.usage:
            documentation += f"Usage: `{record.usage}`"

    return CompletionItem(
        label=name,
        detail=detail,
        insert_text=f"{name}();",
        documentation=documentation,
    )
