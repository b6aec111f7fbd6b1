"""Shared pytest fixtures for all tests."""

import logging
import sys

import pytest
from prompt_toolkit.application import create_app_session
from prompt_toolkit.output.plain_text import PlainTextOutput

from cli.config import Config


class _CurrentStdout:
    """Resolve sys.stdout at write time; capsys swaps it between test phases."""

    def __getattr__(self, name):
        return getattr(sys.stdout, name)


@pytest.fixture(autouse=True)
def plain_terminal(capsys):
    """Route prompt_toolkit printing to the captured stdout of each test."""
    with create_app_session(output=PlainTextOutput(_CurrentStdout())):
        yield


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .chunksplit directory
    """
    config_dir = tmp_path / '.chunksplit'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """Config instance backed by a temp config file."""
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def make_source(tmp_path):
    """
    Factory creating a source file with deterministic content.

    Returns:
        Function (size, name='source.bin') -> Path
    """
    def _make(size: int, name: str = 'source.bin'):
        path = tmp_path / name
        path.write_bytes(bytes(i % 251 for i in range(size)))
        return path
    return _make


@pytest.fixture
def chunk_dir(tmp_path):
    """Path of a not-yet-created chunk directory."""
    return tmp_path / 'chunks'


class ScriptedInput:
    """Feeds prepared answers to prompts and records the prompts shown."""

    def __init__(self, *answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, message: str) -> str:
        self.prompts.append(message)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)


@pytest.fixture
def scripted_input():
    """Factory for ScriptedInput readers."""
    return ScriptedInput


@pytest.fixture
def reset_app_logger():
    """Restore handlers and level of the application logger after a test."""
    app_logger = logging.getLogger('chunksplit')
    handlers = list(app_logger.handlers)
    level = app_logger.level
    propagate = app_logger.propagate
    yield app_logger
    app_logger.handlers = handlers
    app_logger.setLevel(level)
    app_logger.propagate = propagate
