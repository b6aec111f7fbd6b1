"""Exception classes for split and reconstruct operations."""


class ChunkSplitError(Exception):
    """
    Base exception class for all chunksplit errors.
    """
    pass


class SourceNotFoundError(ChunkSplitError):
    """
    Raised when the file to split does not exist or is not a regular file.
    """
    pass


class AlreadyPopulatedError(ChunkSplitError):
    """
    Raised when the target directory of a split already contains entries.
    """
    pass


class ChunkIOError(ChunkSplitError):
    """
    Raised when reading or writing a chunk, metadata or output file fails.
    """
    pass


class MalformedMetadataError(ChunkSplitError):
    """
    Raised when info.json cannot be read or does not hold a usable filename.
    """
    pass
