"""Static configuration for blockscope.

Block streaming settings for every provider and account live in a single
JSON file so chunk sizes can be tuned without touching Python. The file
location can be overridden with BLOCKSCOPE_CONFIG (read from .env too).
"""

import json
import os
from typing import Any, Optional

from dotenv import load_dotenv

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

# Default config location; BLOCKSCOPE_CONFIG takes precedence when set.
DEFAULT_CONFIG_PATH = os.path.join(PROJECT_ROOT, "config.json")

CONFIG_ENV_VAR = "BLOCKSCOPE_CONFIG"


def config_path(explicit: Optional[str] = None) -> str:
    """Return the config path from the argument, the environment, or the default."""

    if explicit:
        return explicit
    load_dotenv()
    return os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH


def load_config(path: Optional[str] = None) -> Optional[dict[str, Any]]:
    """Load the JSON config snapshot.

    A missing file at the default location means "no config" and yields
    None. A missing file that was explicitly requested is an error.
    """

    resolved = config_path(path)
    explicit = bool(path) or bool(os.getenv(CONFIG_ENV_VAR))
    if not os.path.exists(resolved):
        if explicit:
            raise FileNotFoundError(f"Config file not found: {resolved}")
        return None

    with open(resolved, "r", encoding="utf-8") as handle:
        loaded = json.load(handle)
    if not isinstance(loaded, dict):
        raise ValueError("config root must be an object")
    return loaded


def logging_config(config: Optional[dict[str, Any]]) -> dict[str, Any]:
    """Return the optional `logging` section."""

    if not config:
        return {}
    section = config.get("logging", {})
    return section if isinstance(section, dict) else {}
