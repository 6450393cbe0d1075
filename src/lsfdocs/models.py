"""Models shared across lsfdocs layers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class SyntaxRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    syntax: str
    description: str


class BaselineRecord(BaseModel):
    """Minimal metadata for one command, supplied by commands.json.

    Fields beyond the declared ones are kept and passed through to the
    merged output unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    description: str
    usage: str
    category: str | None = None


class MergedRecord(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    description: str
    usage: str
    category: str | None = None
    markdown: str = ""
    summary: str = ""
    syntax: tuple[SyntaxRow, ...] = ()
    example: str = ""


@dataclass(frozen=True)
class ExtractedRecord:
    title: str = ""
    description: str = ""
    summary: str = ""
    syntax_rows: tuple[SyntaxRow, ...] = ()
    example: str = ""
    body: str = ""


@dataclass(frozen=True)
class MergeStats:
    enhanced_count: int
    fallback_count: int


@dataclass(frozen=True)
class RunSummary:
    output_path: Path
    total_count: int
    enhanced_count: int
    fallback_count: int
    with_syntax_count: int
    with_example_count: int
    skipped_documents: list[str]


@dataclass(frozen=True)
class ResolvedPaths:
    baseline_file_abs: Path
    docs_dir_abs: Path
    output_file_abs: Path
    log_file_abs: Path | None
