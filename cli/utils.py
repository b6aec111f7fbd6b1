"""Utility functions for CLI output."""

from pathlib import Path


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count with binary units (B, KiB, MiB, GiB, TiB).

    Examples: "512 B", "1.50 MiB".
    """
    if size_bytes < 1024:
        return f"{size_bytes} B"

    size = float(size_bytes)
    for unit in ('KiB', 'MiB', 'GiB', 'TiB'):
        size /= 1024.0
        if size < 1024.0:
            return f"{size:.2f} {unit}"
    return f"{size / 1024.0:.2f} PiB"


def list_subdirectories(directory: Path) -> list[Path]:
    """
    List subdirectories sorted by name.

    Returns an empty list if the directory cannot be read.
    """
    try:
        entries = list(directory.iterdir())
    except OSError:
        return []
    return sorted((entry for entry in entries if entry.is_dir()), key=lambda p: p.name)
