"""Numbered menus with role-tagged entries."""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText

from cli.constants import CHOICE_PROMPT, INVALID_CHOICE, STYLE


class EntryKind(Enum):
    """Role of a menu entry, decides how it is rendered."""

    DIRECTORY = "directory"
    CHUNK = "chunk"
    ACTION = "action"
    EXIT = "exit"


@dataclass(frozen=True)
class MenuEntry:
    """A selectable menu line."""

    label: str
    kind: EntryKind


def format_entry(number: int, entry: MenuEntry) -> FormattedText:
    """Render a menu line as styled text, e.g. '2. Split file' in blue."""
    return FormattedText([(f"class:entry.{entry.kind.value}", f"{number}. {entry.label}")])


def parse_choice(response: str, count: int) -> Optional[int]:
    """
    Parse a 1-based menu selection.

    Args:
        response: Raw user input
        count: Number of entries in the menu

    Returns:
        Zero-based index of the chosen entry, or None if invalid
    """
    try:
        number = int(response.strip())
    except ValueError:
        return None
    if 1 <= number <= count:
        return number - 1
    return None


def list_prompt(
    title: str,
    entries: Sequence[MenuEntry],
    read_line: Callable[[str], str],
) -> MenuEntry:
    """
    Show a numbered menu and read a selection until it is valid.

    Args:
        title: Line printed above the entries (skipped when empty)
        entries: Menu entries in display order
        read_line: Function reading one line of input for a prompt

    Returns:
        The selected entry

    Raises:
        EOFError: If input ends before a valid choice is made
    """
    while True:
        if title:
            print_formatted_text(title)
        for number, entry in enumerate(entries, start=1):
            print_formatted_text(format_entry(number, entry), style=STYLE)
        try:
            response = read_line(CHOICE_PROMPT)
        except KeyboardInterrupt:
            continue
        index = parse_choice(response, len(entries))
        if index is not None:
            return entries[index]
        print_formatted_text(INVALID_CHOICE)
