"""Shared I/O helpers: locating a CSV source and reading its text."""

from pathlib import Path
from typing import Iterable, List

from .errors import LoadError


def resolve_path(file_path: str, search_paths: Iterable[Path] = ()) -> Path:
    """Find the file a caller meant by ``file_path``.

    A path that exists as given wins. Otherwise a relative path is tried
    under each search directory in order.

    Raises:
        LoadError: If no candidate exists.
    """
    path = Path(file_path)
    if path.is_file():
        return path

    searched: List[str] = []
    if not path.is_absolute():
        for directory in search_paths:
            candidate = Path(directory) / path
            if candidate.is_file():
                return candidate
            searched.append(str(directory))

    reason = "file not found"
    if searched:
        reason = f"file not found (searched: {', '.join(searched)})"
    raise LoadError(file_path, reason)


def read_text(path: Path, encoding: str = "utf-8-sig") -> str:
    """Read a whole file, reporting I/O and decode failures as LoadError."""
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError, LookupError) as exc:
        raise LoadError(str(path), str(exc)) from exc
