"""Interactive menu flows driving split and reconstruct."""

from pathlib import Path
from typing import Callable, Optional

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from chunker.chunk_storage import list_chunks, total_chunk_size
from chunker.reconstructor import reconstruct_file
from chunker.splitter import split_file
from cli.constants import (
    EXIT_LABEL,
    FILE_NOT_FOUND_MESSAGE,
    MAIN_MENU_TITLE,
    PARENT_DIRECTORY_LABEL,
    RECONSTRUCT_FILE_LABEL,
    RECONSTRUCT_LABEL,
    SOURCE_PATH_PROMPT,
    SPLIT_FILE_LABEL,
    SPLIT_INTERRUPTED_MESSAGE,
    SPLIT_SUCCESS_MESSAGE,
    STYLE,
    TARGET_DIR_PROMPT,
)
from cli.menu import EntryKind, MenuEntry, list_prompt
from cli.utils import format_file_size, list_subdirectories
from common.constants import CHUNK_SIZE_BYTES
from common.exceptions import ChunkSplitError
from common.logging_config import get_logger

logger = get_logger(__name__)

ReadLine = Callable[[str], str]

MAIN_MENU = (
    MenuEntry(RECONSTRUCT_FILE_LABEL, EntryKind.ACTION),
    MenuEntry(SPLIT_FILE_LABEL, EntryKind.ACTION),
    MenuEntry(EXIT_LABEL, EntryKind.EXIT),
)


def build_directory_menu(directory: Path) -> list[MenuEntry]:
    """
    Build navigation entries for a directory.

    Subdirectories come first in name order, tagged as chunk sets when
    they hold chunk files, followed by the parent link, the
    Reconstruct action and Exit.
    """
    entries = []
    for subdirectory in list_subdirectories(directory):
        kind = EntryKind.CHUNK if _chunks_in(subdirectory) else EntryKind.DIRECTORY
        entries.append(MenuEntry(subdirectory.name, kind))
    if directory.parent != directory:
        entries.append(MenuEntry(PARENT_DIRECTORY_LABEL, EntryKind.DIRECTORY))
    entries.append(MenuEntry(RECONSTRUCT_LABEL, EntryKind.ACTION))
    entries.append(MenuEntry(EXIT_LABEL, EntryKind.EXIT))
    return entries


def _chunks_in(directory: Path) -> list[Path]:
    try:
        return list_chunks(directory)
    except OSError:
        return []


def describe_directory(directory: Path) -> str:
    """Summary line of the chunk files found in a directory."""
    chunks = _chunks_in(directory)
    if not chunks:
        return "\tNo chunk files found in this directory."
    try:
        size = f" ({format_file_size(total_chunk_size(chunks))})"
    except OSError:
        size = ""
    return f"\tFound {len(chunks)} chunk files in this directory{size}."


def reconstruct_flow(directory: Path, read_line: ReadLine) -> int:
    """
    Navigate directories until the user reconstructs or exits.

    Returns:
        Process exit code (always 0, reconstruct errors are only reported)
    """
    while True:
        print_formatted_text(
            FormattedText([("class:location", f"\n>>>\t{directory}")]), style=STYLE
        )
        print_formatted_text(describe_directory(directory))

        choice = list_prompt("", build_directory_menu(directory), read_line)

        if choice.kind == EntryKind.EXIT:
            return 0
        if choice.kind == EntryKind.ACTION:
            try:
                name = reconstruct_file(directory)
            except ChunkSplitError as e:
                print_formatted_text(f"Error during reconstruction: {e}")
            else:
                print_formatted_text(f'Reconstructed file saved as "{name}".')
            return 0
        if choice.label == PARENT_DIRECTORY_LABEL:
            directory = directory.parent
        else:
            directory = directory / choice.label
        logger.debug(f"Navigated to {directory}")


def split_flow(read_path: ReadLine, chunk_size: int = CHUNK_SIZE_BYTES) -> int:
    """
    Ask for a source file and a target directory, then split.

    Returns:
        0 on success, 1 if the source is missing or the split fails
        or is interrupted
    """
    source = Path(read_path(SOURCE_PATH_PROMPT).strip()).expanduser()
    if not source.is_file():
        print_formatted_text(FILE_NOT_FOUND_MESSAGE)
        return 1

    target = Path(read_path(TARGET_DIR_PROMPT).strip()).expanduser()
    try:
        result = split_file(source, target, chunk_size=chunk_size)
    except ChunkSplitError as e:
        print_formatted_text(f"Error during splitting: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning(f"Split into {target} interrupted; chunk set is incomplete")
        print_formatted_text(SPLIT_INTERRUPTED_MESSAGE)
        return 1

    print_formatted_text(SPLIT_SUCCESS_MESSAGE)
    print_formatted_text(
        f"{result.chunk_count} chunk(s), {format_file_size(result.total_bytes)} in {result.directory}"
    )
    return 0


def run_shell(
    read_line: ReadLine,
    read_path: Optional[ReadLine] = None,
    working_dir: Optional[Path] = None,
    chunk_size: int = CHUNK_SIZE_BYTES,
) -> int:
    """
    Run the top-level menu once and the flow it selects.

    Args:
        read_line: Reads a menu selection for a prompt
        read_path: Reads a filesystem path for a prompt (defaults to read_line)
        working_dir: Starting directory for reconstruct navigation
        chunk_size: Chunk size for splitting

    Returns:
        Process exit code
    """
    if read_path is None:
        read_path = read_line
    directory = (working_dir or Path.cwd()).resolve()

    try:
        choice = list_prompt(MAIN_MENU_TITLE, MAIN_MENU, read_line)
        if choice.label == RECONSTRUCT_FILE_LABEL:
            return reconstruct_flow(directory, read_line)
        if choice.label == SPLIT_FILE_LABEL:
            return split_flow(read_path, chunk_size)
        return 0
    except (EOFError, KeyboardInterrupt):
        print_formatted_text("\nGoodbye!")
        return 0
