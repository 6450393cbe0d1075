"""Literal constants used by lsfdocs."""

APP_NAME = "lsfdocs"

DOC_SUFFIX = ".md"

HEADING_MARKER = "#"
TABLE_ROW_MARKER = "|"
CODE_FENCE = "```"
EXAMPLE_MARKER = "**Example**"
BOLD_MARKER = "**"

SUMMARY_MAX_CHARS = 100
SUMMARY_ELLIPSIS = "..."

# Description convention used when a baseline entry has no real prose.
DEFAULT_PLACEHOLDER_PREFIX = "Lumerical command"
DEFAULT_COMPLETION_DETAIL = "Lumerical command"

# The trailing related-links block opens with this phrase, either after one
# of these prefixes (regex fragments) or alone on its line. Matched
# case-insensitively; the earliest occurrence in a document wins.
RELATED_LINKS_PHRASE = "See Also"
RELATED_LINKS_PREFIXES = (
    r"\*\*",
    r"#{1,6}",
)

HOVER_CODE_LANGUAGE = "matlab"

OUTPUT_JSON_INDENT = 2

WARNING_PREFIX = "WARNING:"
ERROR_PREFIX = "ERROR:"
