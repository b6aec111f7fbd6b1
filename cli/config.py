"""Configuration management for the chunksplit CLI."""

import json
import shutil
from pathlib import Path
from typing import Optional

from cli.constants import CONFIG_DIR_NAME, CONFIG_FILE_NAME
from common.constants import CHUNK_SIZE_BYTES
from common.logging_config import get_logger

logger = get_logger(__name__)


def default_config_path() -> Path:
    """Get the per-user config file path (~/.chunksplit/config.json)."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class Config:
    """Manages CLI configuration stored in JSON file."""

    DEFAULT_CONFIG = {
        "chunk_size_bytes": CHUNK_SIZE_BYTES,
        "log_level": "WARNING",
        "start_directory": None,
    }

    def __init__(self, config_path: Path):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config JSON file (typically ~/.chunksplit/config.json)
        """
        self.config_path = config_path
        self.data = self._load()

    def _load(self) -> dict:
        """
        Load configuration from file, creating defaults if necessary.

        Returns:
            Configuration dictionary
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create config directory {self.config_path.parent}: {e}")

        if self.config_path.exists():
            try:
                with open(self.config_path, 'r') as f:
                    data = json.load(f)
                if not isinstance(data, dict):
                    raise ValueError("config root must be a JSON object")
                config = self.DEFAULT_CONFIG.copy()
                config.update(data)
                return config
            except (ValueError, OSError) as e:
                logger.warning(f"Ignoring unreadable config {self.config_path}: {e}")
                backup_path = self.config_path.with_suffix('.json.bak')
                try:
                    shutil.copy(self.config_path, backup_path)
                except OSError as copy_error:
                    logger.warning(f"Cannot back up config to {backup_path}: {copy_error}")
                return self.DEFAULT_CONFIG.copy()
        else:
            config = self.DEFAULT_CONFIG.copy()
            self._write(config)
            return config

    def _write(self, data: dict) -> None:
        try:
            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning(f"Cannot write config {self.config_path}: {e}")

    def save(self) -> None:
        """Save current configuration to file."""
        self._write(self.data)

    def get_chunk_size(self) -> int:
        """
        Get chunk size used when splitting.

        Returns:
            Positive chunk size in bytes, the 5 MiB default if the stored
            value is not a positive integer
        """
        value = self.data.get('chunk_size_bytes')
        if isinstance(value, int) and not isinstance(value, bool) and value > 0:
            return value
        return CHUNK_SIZE_BYTES

    def get_log_level(self) -> str:
        return str(self.data.get('log_level') or 'WARNING').upper()

    def get_start_directory(self) -> Optional[Path]:
        """
        Get initial directory for reconstruct navigation.

        Returns:
            Configured directory, or None to use the process working directory
        """
        value = self.data.get('start_directory')
        if not value:
            return None
        return Path(value).expanduser()
