"""Pytest configuration and fixtures for lsfdocs tests."""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path

import pytest

from lsfdocs.logging_utils import reset_logging

ABS_DOC = """# abs

Returns absolute value.

| Syntax | Description |
|---|---|
| abs(x) | Absolute value of x |

**Example**

```
abs(-2)
```
"""


@pytest.fixture(autouse=True)
def _reset_lsfdocs_logging() -> Iterator[None]:
    yield
    reset_logging()


@pytest.fixture
def write_baseline(tmp_path: Path):
    def _write(entries: list[dict], name: str = "commands.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(entries, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    path = tmp_path / "docs"
    path.mkdir()
    (path / "abs.md").write_text(ABS_DOC, encoding="utf-8")
    return path
