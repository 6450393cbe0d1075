from __future__ import annotations

from pathlib import Path

from lsfdocs.command_index import CommandIndex
from lsfdocs.corpus_gateway import write_merged_corpus
from lsfdocs.hover import hover_for_word, render_hover_markdown
from lsfdocs.models import MergedRecord, SyntaxRow


def test_generated_markdown_is_used_verbatim() -> None:
    record = MergedRecord(
        name="testcmd",
        description="Test command description",
        usage="testcmd();",
        markdown="# Test Command\n\nThis is a test command.",
        summary="Test command summary",
    )

    assert render_hover_markdown(record) == "# Test Command\n\nThis is a test command."


def test_basic_formatting_without_markdown() -> None:
    record = MergedRecord(
        name="basiccmd",
        description="Basic command description",
        usage="basiccmd();",
        category="basic",
    )

    text = render_hover_markdown(record)

    assert text.startswith("### basiccmd\n\n")
    assert "Basic command description" in text
    assert "**Usage:** `basiccmd();`" in text
    assert "**Category:** basic" in text
    assert "**Syntax:**" not in text
    assert "**Example:**" not in text


def test_basic_formatting_includes_syntax_table_and_example() -> None:
    record = MergedRecord(
        name="syntaxcmd",
        description="Command with syntax",
        usage="syntaxcmd(arg);",
        syntax=[
            SyntaxRow(syntax="syntaxcmd(arg1);", description="First syntax"),
            SyntaxRow(syntax="syntaxcmd(arg1, arg2);", description="Second syntax"),
        ],
        example="syntaxcmd(1);\nsyntaxcmd(1, 2);",
    )

    text = render_hover_markdown(record)

    assert "| Syntax | Description |" in text
    assert "| `syntaxcmd(arg1);` | First syntax |" in text
    assert "| `syntaxcmd(arg1, arg2);` | Second syntax |" in text
    assert text.endswith(
        "**Example:**\n\n```matlab\nsyntaxcmd(1);\nsyntaxcmd(1, 2);\n```\n"
    )


def test_hover_for_word(tmp_path: Path) -> None:
    data = tmp_path / "commands-enhanced.json"
    write_merged_corpus(
        data,
        [MergedRecord(name="abs", description="d", usage="abs(x)", markdown="# abs")],
    )
    index = CommandIndex(data)

    assert hover_for_word(index, "abs") == "# abs"
    assert hover_for_word(index, "sqrt") is None
    assert hover_for_word(index, "") is None
