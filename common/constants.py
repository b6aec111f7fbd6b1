"""Project-wide constants (chunk size, file naming conventions)."""

CHUNK_SIZE_BYTES: int = 5 * 1024 * 1024  # 5 MiB default chunk size

CHUNK_PREFIX = "chunk"
CHUNK_INDEX_WIDTH = 3
# Lexicographic order matches split order only below this many chunks.
MAX_ORDERED_CHUNKS = 10 ** CHUNK_INDEX_WIDTH

METADATA_FILENAME = "info.json"
DEFAULT_OUTPUT_NAME = "reconstructed_file"

COPY_BUFFER_SIZE = 64 * 1024

APP_LOGGER_NAME = "chunksplit"
