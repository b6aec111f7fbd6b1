"""The info.json record stored next to the chunks of a split file."""

import os
from pathlib import Path

from pydantic import BaseModel, ValidationError, field_validator

from common.constants import METADATA_FILENAME
from common.exceptions import MalformedMetadataError

# Separators that would let a stored name escape the chunk directory.
PATH_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep)


class ChunkSetInfo(BaseModel):
    """Metadata model for a chunk directory."""
    original_filename: str

    @field_validator('original_filename')
    @classmethod
    def must_be_base_name(cls, value: str) -> str:
        if not value or value in ('.', '..') or any(sep in value for sep in PATH_SEPARATORS):
            raise ValueError('original_filename must be a plain file name')
        return value


def get_metadata_path(directory: Path) -> Path:
    return Path(directory) / METADATA_FILENAME


def build_metadata(original_filename: str) -> ChunkSetInfo:
    """
    Build the record for a source file name.

    Bytes of the name that are not valid UTF-8 are replaced with U+FFFD,
    so every file name the OS hands back can be stored as JSON.

    Args:
        original_filename: Base name of the source file

    Returns:
        Validated ChunkSetInfo

    Raises:
        MalformedMetadataError: If the name is not a plain file name
    """
    lossy_name = os.fsencode(original_filename).decode('utf-8', 'replace')
    try:
        return ChunkSetInfo(original_filename=lossy_name)
    except ValidationError as e:
        raise MalformedMetadataError(f"Cannot record file name {lossy_name!r}") from e


def write_metadata(directory: Path, info: ChunkSetInfo) -> Path:
    """
    Write info.json for a new chunk set.

    Args:
        directory: Chunk directory
        info: Record built by build_metadata

    Returns:
        Path to the metadata file

    Raises:
        OSError: If the file cannot be written
    """
    path = get_metadata_path(directory)
    path.write_text(info.model_dump_json(), encoding='utf-8')
    return path


def read_metadata(directory: Path) -> ChunkSetInfo:
    """
    Load and validate info.json from a chunk directory.

    Raises:
        MalformedMetadataError: If the file is missing, unreadable,
            not JSON, or has no usable original_filename
    """
    path = get_metadata_path(directory)
    try:
        raw = path.read_text(encoding='utf-8')
    except FileNotFoundError as e:
        raise MalformedMetadataError(f"{METADATA_FILENAME} not found in {directory}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise MalformedMetadataError(f"Cannot read {path}: {e}") from e

    try:
        return ChunkSetInfo.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedMetadataError(f"Invalid {METADATA_FILENAME}: {e.error_count()} error(s)") from e
