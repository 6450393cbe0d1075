from __future__ import annotations

from lsfdocs.models import ExtractedRecord, SyntaxRow
from lsfdocs.section_scanner import (
    cut_trailing_section,
    derive_summary,
    find_example,
    find_related_links,
    find_title,
    read_description,
    scan_document,
)

from conftest import ABS_DOC


def test_title_is_first_heading_without_marker() -> None:
    record = scan_document("\n\n#   Foo  \n\nBody text.\n")

    assert record.title == "Foo"


def test_title_skips_leading_non_heading_lines() -> None:
    title, next_index = find_title(["intro", "", "## addfdtd", "text"], 0)

    assert title == "addfdtd"
    assert next_index == 3


def test_missing_title_is_empty_and_keeps_cursor() -> None:
    assert find_title(["no heading", "here"], 0) == ("", 0)


def test_description_joins_prose_until_table_row() -> None:
    record = scan_document(
        "# Foo\nFirst prose line.\nSecond prose line.\n| Syntax | Description |\n"
    )

    assert record.description == "First prose line. Second prose line."


def test_description_stops_at_blank_fence_or_example_label() -> None:
    lines = ["", "", "Adds a mesh.", "**Example**", "more"]
    assert read_description(lines, 0) == ("Adds a mesh.", 3)

    lines = ["Runs.", "```", "run;", "```"]
    assert read_description(lines, 0) == ("Runs.", 1)

    lines = ["Line one.", "", "Line two."]
    assert read_description(lines, 0) == ("Line one.", 1)


def test_summary_is_first_sentence() -> None:
    record = scan_document("# abs\n\nReturns absolute value. Works on matrices.\n")

    assert record.summary == "Returns absolute value"


def test_summary_truncates_long_first_sentence() -> None:
    description = "x" * 130 + ". Tail."

    summary = derive_summary(description, "title")

    assert summary == "x" * 100 + "..."
    assert len(summary) == 103


def test_summary_without_period_is_whole_description() -> None:
    assert derive_summary("Creates a new rectangle", "addrect") == "Creates a new rectangle"


def test_summary_for_description_opening_with_period_uses_title() -> None:
    record = scan_document("# loaddata\n\n.mat files are loaded into the workspace.\n")

    assert record.description == ".mat files are loaded into the workspace."
    assert record.summary == "loaddata"


def test_summary_for_description_opening_with_period_without_title() -> None:
    description = ".mat files are loaded into the workspace."

    assert derive_summary(description, "") == description
    assert derive_summary("." + "x" * 120, "") == "." + "x" * 99 + "..."


def test_summary_falls_back_to_title() -> None:
    record = scan_document("# addrect\n\n| a | b |\n|---|---|\n")

    assert record.description == ""
    assert record.summary == "addrect"


def test_syntax_table_is_parsed_after_description() -> None:
    text = "\n".join(
        [
            "# matlab",
            "",
            "Runs MATLAB code.",
            "",
            "| Syntax | Description |",
            "|---|---|",
            "| **matlab(\"cmd\");** | Sends **cmd** to MATLAB. |",
            "| broken |",
            "| matlab; | Opens a session. |",
        ]
    )

    record = scan_document(text)

    assert record.syntax_rows == (
        SyntaxRow(syntax='matlab("cmd");', description="Sends cmd to MATLAB."),
        SyntaxRow(syntax="matlab;", description="Opens a session."),
    )


def test_example_captures_fenced_block_after_label() -> None:
    text = "# run\n\nRuns.\n\n**Example**\n\n```\nrun;\n  save(\"x\");\n```\n"

    record = scan_document(text)

    assert record.example == 'run;\n  save("x");'


def test_example_label_without_fence_yields_empty() -> None:
    record = scan_document("# run\n\nRuns.\n\n**Example**\n\nJust prose here.\n")

    assert record.example == ""


def test_unclosed_fence_yields_empty_example() -> None:
    lines = ["**Example**", "```", "run;"]

    assert find_example(lines, 0) == ("", 0)


def test_example_found_when_table_is_missing() -> None:
    record = scan_document("# run\n\nRuns.\n\n**Example**\n\n```\nrun;\n```\n")

    assert record.syntax_rows == ()
    assert record.example == "run;"


def test_body_cut_at_bold_related_links_heading() -> None:
    text = "# abs\n\nReturns absolute value.\n\n**See Also**\n\n[sqrt](./sqrt.md)\n"

    record = scan_document(text)

    assert record.body == "# abs\n\nReturns absolute value."
    assert "sqrt" not in record.body


def test_body_cut_is_case_insensitive_for_heading_variants() -> None:
    assert cut_trailing_section("intro\n\n### see also\n\n- x") == "intro"
    assert cut_trailing_section("intro\n\n## SEE ALSO\n- x") == "intro"
    assert cut_trailing_section("intro\n\nSee also:\n- x") == "intro"


def test_body_cut_allows_any_spacing_after_heading_marker() -> None:
    assert cut_trailing_section("intro\n\n###See Also\n- x") == "intro"
    assert cut_trailing_section("intro\n\n###  See Also\n- x") == "intro"
    assert cut_trailing_section("intro\n\n#### See also\n- x") == "intro"
    assert cut_trailing_section("intro\n\n** See Also **\n- x") == "intro"


def test_body_cut_uses_earliest_marker() -> None:
    text = "intro\n\n### See Also\n\nx\n\n**See Also**\n\ny"

    assert find_related_links(text) == text.index("### See Also")


def test_body_unchanged_without_related_links() -> None:
    text = "# abs\n\nIf needed, see also the manual for details.\n\n"

    assert cut_trailing_section(text) == text
    assert scan_document(text).body == text


def test_empty_document_degrades_to_empty_record() -> None:
    assert scan_document("") == ExtractedRecord()


def test_sample_document_extraction() -> None:
    record = scan_document(ABS_DOC)

    assert record.title == "abs"
    assert record.description == "Returns absolute value."
    assert record.summary == "Returns absolute value"
    assert record.syntax_rows == (
        SyntaxRow(syntax="abs(x)", description="Absolute value of x"),
    )
    assert record.example == "abs(-2)"
    assert record.body == ABS_DOC
