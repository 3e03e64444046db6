"""Filesystem utility functions."""

from pathlib import Path


def ensure_exists(path: Path, what: str) -> None:
    """
    Check that a path exists, raise FileNotFoundError if not.

    Args:
        path: Path to check
        what: Description of what this path represents (for error message)
    """
    if not path.exists():
        raise FileNotFoundError(f"Missing {what} at: {path}")


def read_text(path: Path) -> str:
    """
    Read a UTF-8 text file, dropping a leading BOM (spreadsheet exports add one).

    Args:
        path: Path to text file

    Returns:
        File contents with leading/trailing whitespace removed
    """
    return path.read_text(encoding="utf-8-sig").strip()


def write_text(path: Path, content: str, *, bom: bool = False) -> Path:
    """
    Write text as UTF-8, creating parent directories.

    Args:
        path: Destination file
        content: Text to write
        bom: Prefix a BOM so spreadsheet apps detect UTF-8 (CSV downloads)

    Returns:
        The written path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8-sig" if bom else "utf-8")
    return path
