"""CLI entry point."""

import sys

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import PathCompleter
from prompt_toolkit.history import InMemoryHistory

from cli.config import Config, default_config_path
from cli.constants import STYLE
from cli.shell import run_shell
from common.logging_config import setup_logging


def main() -> int:
    """Entry point for CLI."""
    config = Config(default_config_path())
    logger = setup_logging('cli', log_level=config.get_log_level())

    session: PromptSession = PromptSession(history=InMemoryHistory(), style=STYLE)
    path_completer = PathCompleter(expanduser=True)

    def read_line(message: str) -> str:
        return session.prompt([("class:prompt", message)])

    def read_path(message: str) -> str:
        return session.prompt([("class:prompt", message)], completer=path_completer)

    logger.info("CLI starting...")
    try:
        return run_shell(
            read_line,
            read_path=read_path,
            working_dir=config.get_start_directory(),
            chunk_size=config.get_chunk_size(),
        )
    except Exception as e:
        logger.error(f"CLI error: {e}", exc_info=True)
        raise
    finally:
        logger.info("CLI exiting")


if __name__ == "__main__":
    sys.exit(main())
