"""Reassembles a split file by concatenating its chunks in name order."""

from pathlib import Path

from chunker.chunk_storage import list_chunks, read_chunk_streaming
from chunker.metadata import read_metadata
from common.constants import DEFAULT_OUTPUT_NAME
from common.exceptions import ChunkIOError, MalformedMetadataError
from common.logging_config import get_logger

logger = get_logger(__name__)


def resolve_output_name(directory: Path) -> str:
    """
    Get the name to reconstruct under.

    Returns:
        original_filename from info.json, or DEFAULT_OUTPUT_NAME when the
        record is missing or malformed
    """
    try:
        return read_metadata(directory).original_filename
    except MalformedMetadataError as e:
        logger.warning(f"{e}; using '{DEFAULT_OUTPUT_NAME}'")
        return DEFAULT_OUTPUT_NAME


def reconstruct_file(directory) -> str:
    """
    Concatenate the chunk files of a directory into the original file.

    The output is written next to the chunks and replaces any existing
    file of the same name. Gaps in the chunk sequence are not detected.

    Args:
        directory: Chunk directory produced by split_file

    Returns:
        Name of the reconstructed file

    Raises:
        ChunkIOError: If the directory cannot be listed, a chunk cannot be
            read, or the output cannot be written
    """
    directory = Path(directory)
    name = resolve_output_name(directory)
    output_path = directory / name

    try:
        chunks = list_chunks(directory, exclude=(name,))
        logger.info(f"Reconstructing {output_path} from {len(chunks)} chunks")

        with open(output_path, 'wb') as output:
            for chunk_path in chunks:
                for piece in read_chunk_streaming(chunk_path):
                    output.write(piece)
                logger.debug(f"Appended {chunk_path.name}")
    except OSError as e:
        logger.error(f"Reconstruction in {directory} failed: {e}")
        raise ChunkIOError(str(e)) from e

    return name
