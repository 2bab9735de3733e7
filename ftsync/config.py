"""Configuration loading for ft-sync.

The config is a small JSON document naming the local directory to mirror
and the collection it is mirrored into::

    {
        "root": "docs",
        "collection": "testuser/index",
        "ignore": ["*.tmp"],
        "excludeDotFiles": true,
        "sortEntries": false
    }
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from .exceptions import ConfigError
from .tree.builder import TreeBuilder
from .utils import DEFAULT_CONFIG_NAME

logger = logging.getLogger(__name__)

# Environment variable that overrides the default config location
CONFIG_ENV_VAR: str = "FT_SYNC_CONFIG"

REQUIRED_FIELDS = ("root", "collection")


@dataclass
class SyncConfig:
    """Local directory and target collection for a sync."""

    root: Path
    """Local directory to mirror"""

    collection: str
    """Collection id used as display prefix"""

    ignore: list[str] = field(default_factory=list)
    """Glob patterns to leave out of the tree"""

    exclude_dot_files: bool = False
    """Whether to leave out entries starting with a dot"""

    sort_entries: bool = False
    """Whether to sort directory listings by name"""

    def __post_init__(self) -> None:
        if isinstance(self.root, str):
            self.root = Path(self.root)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SyncConfig":
        """Create config from a parsed JSON object.

        Raises:
            ConfigError: If required fields are missing or have the wrong type
        """
        missing = [name for name in REQUIRED_FIELDS if name not in data]
        if missing:
            raise ConfigError(f"Missing required fields: {', '.join(missing)}")

        for name in REQUIRED_FIELDS:
            if not isinstance(data[name], str) or not data[name]:
                raise ConfigError(f"Field '{name}' must be a non-empty string")

        ignore = data.get("ignore", [])
        if not isinstance(ignore, list) or not all(isinstance(p, str) for p in ignore):
            raise ConfigError("Field 'ignore' must be a list of strings")

        for name in ("excludeDotFiles", "sortEntries"):
            if not isinstance(data.get(name, False), bool):
                raise ConfigError(f"Field '{name}' must be a boolean")

        return cls(
            root=Path(data["root"]),
            collection=data["collection"],
            ignore=list(ignore),
            exclude_dot_files=data.get("excludeDotFiles", False),
            sort_entries=data.get("sortEntries", False),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for JSON serialization."""
        return {
            "root": self.root.as_posix(),
            "collection": self.collection,
            "ignore": list(self.ignore),
            "excludeDotFiles": self.exclude_dot_files,
            "sortEntries": self.sort_entries,
        }

    def tree_builder(self) -> TreeBuilder:
        """Create a TreeBuilder with this config's filtering options."""
        return TreeBuilder(
            ignore_patterns=self.ignore,
            exclude_dot_files=self.exclude_dot_files,
            sort_entries=self.sort_entries,
        )


def get_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """Resolve which config file to use.

    An explicit path wins, then ``$FT_SYNC_CONFIG``, then ``ft-sync.json``
    in the current directory.
    """
    if path is not None:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path(DEFAULT_CONFIG_NAME)


def load_config(path: Union[str, Path]) -> SyncConfig:
    """Load a sync config from a JSON file.

    Args:
        path: Path to the config file

    Returns:
        Parsed SyncConfig

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in config file {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a JSON object")

    config = SyncConfig.from_dict(data)
    logger.debug(f"Loaded config from {config_path}: {config.to_dict()}")
    return config
