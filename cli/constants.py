"""CLI constants: menu labels, messages and styles."""

from prompt_toolkit.styles import Style

STYLE = Style.from_dict(
    {
        "prompt": "bold",
        "entry.chunk": "ansibrightgreen",
        "entry.action": "ansibrightblue",
        "entry.exit": "ansibrightred",
        "location": "bold",
    }
)

CONFIG_DIR_NAME = ".chunksplit"
CONFIG_FILE_NAME = "config.json"

MAIN_MENU_TITLE = "Reconstruct or split file:"
RECONSTRUCT_FILE_LABEL = "Reconstruct file"
SPLIT_FILE_LABEL = "Split file"
RECONSTRUCT_LABEL = "Reconstruct"
EXIT_LABEL = "Exit"
PARENT_DIRECTORY_LABEL = ".."

CHOICE_PROMPT = "Enter the number of your choice: "
INVALID_CHOICE = "Invalid choice. Please select a valid number from the list."

SOURCE_PATH_PROMPT = "Enter the path to the file to split\n>>> "
TARGET_DIR_PROMPT = "Give a directory to save the chunks\n>>> "

FILE_NOT_FOUND_MESSAGE = "File does not exist."
SPLIT_SUCCESS_MESSAGE = "File split successfully."
SPLIT_INTERRUPTED_MESSAGE = "Splitting interrupted, the chunk directory is incomplete."
