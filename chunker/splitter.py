"""Splits a file into fixed-size chunk files inside a directory."""

from dataclasses import dataclass
from pathlib import Path

from chunker.chunk_storage import write_chunk
from chunker.metadata import build_metadata, write_metadata
from common.constants import CHUNK_SIZE_BYTES, MAX_ORDERED_CHUNKS
from common.exceptions import (
    AlreadyPopulatedError,
    ChunkIOError,
    MalformedMetadataError,
    SourceNotFoundError,
)
from common.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SplitResult:
    """
    Outcome of a completed split.
    """
    directory: Path
    chunk_paths: tuple[Path, ...]
    total_bytes: int

    @property
    def chunk_count(self) -> int:
        return len(self.chunk_paths)


def _prepare_target_directory(target_directory: Path) -> None:
    """Create the target directory or make sure the existing one is empty."""
    if target_directory.exists():
        if not target_directory.is_dir():
            raise ChunkIOError(f"{target_directory} exists and is not a directory")
        if any(target_directory.iterdir()):
            raise AlreadyPopulatedError(f"Directory is not empty: {target_directory}")
    else:
        target_directory.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created chunk directory {target_directory}")


def split_file(source_path, target_directory, chunk_size: int = CHUNK_SIZE_BYTES) -> SplitResult:
    """
    Split a file into sequential chunk files.

    Chunks are named chunk000, chunk001, ... and all hold exactly
    chunk_size bytes except the last, which holds the remainder. An
    empty source produces only the info.json record.

    Args:
        source_path: Path to the file to split
        target_directory: Directory for the chunks, created if missing,
            must be empty if it exists
        chunk_size: Bytes per chunk (default 5 MiB)

    Returns:
        SplitResult describing the written chunks

    Raises:
        SourceNotFoundError: If source_path is not an existing regular file
        AlreadyPopulatedError: If target_directory already has entries
        ChunkIOError: If any filesystem operation fails
        ValueError: If chunk_size is not positive
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    source_path = Path(source_path)
    target_directory = Path(target_directory)

    if not source_path.is_file():
        raise SourceNotFoundError(f"File does not exist: {source_path}")

    try:
        info = build_metadata(source_path.name)
    except MalformedMetadataError as e:
        raise ChunkIOError(str(e)) from e

    logger.info(f"Splitting {source_path} into {target_directory} ({chunk_size} byte chunks)")

    chunk_paths = []
    total_bytes = 0
    try:
        _prepare_target_directory(target_directory)
        write_metadata(target_directory, info)

        with open(source_path, 'rb') as source:
            while True:
                data = source.read(chunk_size)
                if not data:
                    break
                index = len(chunk_paths)
                if index == MAX_ORDERED_CHUNKS:
                    logger.warning(
                        f"Chunk count exceeds {MAX_ORDERED_CHUNKS - 1}; "
                        f"chunk names will no longer sort in split order"
                    )
                chunk_paths.append(write_chunk(target_directory, index, data))
                total_bytes += len(data)
                logger.debug(f"Wrote {chunk_paths[-1].name} ({len(data)} bytes)")
    except OSError as e:
        logger.error(f"Split of {source_path} failed: {e}")
        raise ChunkIOError(str(e)) from e

    logger.info(f"Split {source_path.name} into {len(chunk_paths)} chunks ({total_bytes} bytes)")
    return SplitResult(
        directory=target_directory,
        chunk_paths=tuple(chunk_paths),
        total_bytes=total_bytes,
    )
