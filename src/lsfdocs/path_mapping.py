"""Path argument mapping and startup validation."""

from __future__ import annotations

import re
import unicodedata
from pathlib import Path

from .errors import PathMappingError, StartupValidationError
from .models import ResolvedPaths

_WINDOWS_DRIVE_RELATIVE_RE = re.compile(r"^[A-Za-z]:[^/\\]")


def map_path_argument(
    raw_path: str,
    argument_name: str,
    *,
    app_root_abs: Path,
    base_dir: Path,
) -> Path:
    """Map one CLI path argument to an absolute path.

    ``~`` expands to the home directory, ``@`` to the app root, and any
    other relative path is joined onto ``base_dir``. Errors name the
    argument they came from.
    """
    if not app_root_abs.is_absolute():
        raise PathMappingError("app_root_abs must be an absolute path.")

    path_text = unicodedata.normalize("NFC", raw_path)
    if "\0" in path_text:
        raise PathMappingError(f"{argument_name} contains a NUL (\\0) character.")
    if _is_windows_rooted_not_fully_qualified(path_text):
        raise PathMappingError(
            f"{argument_name} uses an unsupported Windows rooted-not-qualified "
            f"form (\\name or C:name): {raw_path}"
        )

    try:
        mapped = _map_special_prefixes(path_text, app_root_abs)
    except RuntimeError as exc:
        raise PathMappingError(
            f"{argument_name}: failed to expand user home in {raw_path}"
        ) from exc

    if not mapped.is_absolute():
        mapped = base_dir / mapped
    return mapped.resolve(strict=False)


def resolve_generate_paths(
    *,
    baseline_arg_raw: str,
    docs_arg_raw: str,
    output_arg_raw: str,
    log_arg_raw: str | None,
    app_root_abs: Path,
    base_dir: Path,
) -> ResolvedPaths:
    baseline_file_abs = map_path_argument(
        baseline_arg_raw, "--baseline", app_root_abs=app_root_abs, base_dir=base_dir
    )
    docs_dir_abs = map_path_argument(
        docs_arg_raw, "--docs", app_root_abs=app_root_abs, base_dir=base_dir
    )
    output_file_abs = map_path_argument(
        output_arg_raw, "--output", app_root_abs=app_root_abs, base_dir=base_dir
    )
    log_file_abs = (
        map_path_argument(log_arg_raw, "--log", app_root_abs=app_root_abs, base_dir=base_dir)
        if log_arg_raw is not None
        else None
    )

    _validate_baseline(baseline_file_abs)
    _validate_docs_dir(docs_dir_abs)
    _validate_output(output_file_abs)

    return ResolvedPaths(
        baseline_file_abs=baseline_file_abs,
        docs_dir_abs=docs_dir_abs,
        output_file_abs=output_file_abs,
        log_file_abs=log_file_abs,
    )


def _map_special_prefixes(path_text: str, app_root_abs: Path) -> Path:
    if path_text.startswith("~"):
        # "~\\..." is handled like "~/...".
        normalized_home = re.sub(r"[\\/]+", "/", path_text)
        return Path(normalized_home).expanduser()
    if path_text.startswith("@"):
        return _map_app_root_path(path_text, app_root_abs)
    return Path(re.sub(r"[\\/]+", "/", path_text))


def _map_app_root_path(path_text: str, app_root_abs: Path) -> Path:
    remainder = path_text[1:].lstrip("/\\")
    if not remainder:
        return app_root_abs
    segments = [s for s in re.split(r"[\\/]+", remainder) if s]
    return app_root_abs.joinpath(*segments)


def _is_windows_rooted_not_fully_qualified(path_text: str) -> bool:
    # \name (not \\unc)
    if path_text.startswith("\\") and not path_text.startswith("\\\\"):
        return True
    # C:name (drive-relative, not C:\name or C:/name)
    return _WINDOWS_DRIVE_RELATIVE_RE.match(path_text) is not None


def _validate_baseline(baseline_file_abs: Path) -> None:
    if not baseline_file_abs.exists():
        raise StartupValidationError(f"--baseline does not exist: {baseline_file_abs}")
    if not baseline_file_abs.is_file():
        raise StartupValidationError(f"--baseline must be a file: {baseline_file_abs}")


def _validate_docs_dir(docs_dir_abs: Path) -> None:
    if not docs_dir_abs.exists():
        raise StartupValidationError(f"--docs does not exist: {docs_dir_abs}")
    if not docs_dir_abs.is_dir():
        raise StartupValidationError(f"--docs must be a directory: {docs_dir_abs}")


def _validate_output(output_file_abs: Path) -> None:
    if output_file_abs.exists() and output_file_abs.is_dir():
        raise StartupValidationError(f"--output must be a file path: {output_file_abs}")
