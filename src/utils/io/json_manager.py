"""Module for reading JSON configuration files such as market rosters."""

import json
import os
from typing import Any, List, Optional

from src.utils.io.logger import Logger


class JsonManager:
    """Class for handling JSON file operations."""

    @staticmethod
    def exists(filepath: str) -> bool:
        """Check if a file exists at the given path."""
        return os.path.exists(filepath)

    @staticmethod
    def load(filepath: Optional[str]) -> Any:
        """Load JSON data from a file, returning ``None`` when it cannot be read."""
        if not filepath or not filepath.strip():
            Logger.error("filepath is empty")
            return None
        if not JsonManager.exists(filepath):
            Logger.warning(f"File not found: {filepath}")
            return None
        try:
            with open(filepath, "r", encoding="utf-8") as file:
                return json.load(file)
        except (OSError, TypeError, json.JSONDecodeError) as e:
            Logger.error(f"Error loading JSON file {filepath}: {e}")
            return None

    @staticmethod
    def load_list(filepath: Optional[str], key: Optional[str] = None) -> Optional[List[Any]]:
        """Load a JSON array, either at the document root or under ``key``.

        Returns ``None`` when the file is unreadable or the payload is not a list.
        """
        data = JsonManager.load(filepath)
        if data is None:
            return None
        if key is not None and isinstance(data, dict):
            data = data.get(key)
        if not isinstance(data, list):
            Logger.error(f"Expected a JSON array in {filepath}, got {type(data).__name__}")
            return None
        return data
