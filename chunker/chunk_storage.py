"""Chunk file naming, enumeration and streaming reads inside a chunk directory."""

from pathlib import Path
from typing import Iterator

from common.constants import CHUNK_INDEX_WIDTH, CHUNK_PREFIX, COPY_BUFFER_SIZE


def chunk_name(index: int) -> str:
    """
    Get file name for the chunk at a given split position.

    Args:
        index: Zero-based position of the chunk in the source file

    Returns:
        Name such as "chunk000"; indexes past 999 widen to four digits
    """
    return f"{CHUNK_PREFIX}{index:0{CHUNK_INDEX_WIDTH}d}"


def get_chunk_path(directory: Path, index: int) -> Path:
    """Get full path for the chunk at a given split position."""
    return Path(directory) / chunk_name(index)


def is_chunk_name(name: str) -> bool:
    return name.startswith(CHUNK_PREFIX)


def write_chunk(directory: Path, index: int, data: bytes) -> Path:
    """
    Write chunk data to disk.

    Args:
        directory: Chunk directory
        index: Zero-based position of the chunk
        data: Raw chunk bytes

    Returns:
        Path to written file

    Raises:
        OSError: If write operation fails
    """
    filepath = get_chunk_path(directory, index)
    with open(filepath, 'wb') as f:
        f.write(data)
    return filepath


def list_chunks(directory: Path, exclude: tuple[str, ...] = ()) -> list[Path]:
    """
    List chunk files in a directory in reconstruction order.

    Order is plain name order, which equals split order while the
    chunk count stays below 1000.

    Args:
        directory: Chunk directory to scan
        exclude: File names to leave out even if they carry the chunk prefix

    Returns:
        Sorted list of chunk file paths

    Raises:
        OSError: If the directory cannot be listed
    """
    chunks = [
        entry for entry in Path(directory).iterdir()
        if is_chunk_name(entry.name) and entry.name not in exclude and entry.is_file()
    ]
    return sorted(chunks, key=lambda p: p.name)


def total_chunk_size(chunks: list[Path]) -> int:
    """Sum of chunk file sizes in bytes."""
    return sum(chunk.stat().st_size for chunk in chunks)


def read_chunk_streaming(filepath: Path, piece_size: int = COPY_BUFFER_SIZE) -> Iterator[bytes]:
    """
    Stream chunk data in pieces.

    Args:
        filepath: Path of the chunk file
        piece_size: Size of each piece in bytes (default 64KB)

    Yields:
        Chunk data pieces

    Raises:
        FileNotFoundError: If chunk does not exist
        OSError: If read operation fails
    """
    with open(filepath, 'rb') as f:
        while True:
            piece = f.read(piece_size)
            if not piece:
                break
            yield piece
