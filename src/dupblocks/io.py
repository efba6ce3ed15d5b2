"""Document loading."""

from __future__ import annotations

from pathlib import Path

from dupblocks.core import DupBlocksValueError

__all__ = ["load_lines", "split_lines"]


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, dropping a trailing ``\\r`` from each line.

    A terminating newline does not produce a final empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a text document and return its lines."""
    path = Path(path)
    if path.is_dir():
        raise DupBlocksValueError(f"{path} is a directory, not a file")
    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise DupBlocksValueError(f"Unable to decode {path} as {encoding}: {exc}") from exc
    return split_lines(text)
