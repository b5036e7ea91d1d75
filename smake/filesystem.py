"""Timestamp lookups for rule inputs and outputs."""

from pathlib import Path

from smake.errors import InvalidPathError, MissingInputError


def exists(path: str | Path) -> bool:
    try:
        return Path(path).exists()
    except ValueError:
        return False


def last_modified(path: str | Path) -> int:
    """Return the modification time of ``path`` in nanoseconds.

    Raises ``MissingInputError`` when the path does not exist and
    ``InvalidPathError`` when it cannot name a file at all.
    """
    try:
        return Path(path).stat().st_mtime_ns
    except (FileNotFoundError, NotADirectoryError):
        raise MissingInputError(Path(path)) from None
    except ValueError as exc:
        raise InvalidPathError(Path(path), str(exc)) from None


def last_modified_or_none(path: str | Path) -> int | None:
    """Like ``last_modified``, but ``None`` for anything that is not there."""
    if not exists(path):
        return None
    try:
        return Path(path).stat().st_mtime_ns
    except (FileNotFoundError, NotADirectoryError):
        return None
