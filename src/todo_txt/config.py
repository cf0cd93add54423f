"""Configuration management for todo-txt."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "~/.todo-txt/config.yaml"


@dataclass
class ConfigModel:
    """Settings for the todo-txt command line tool."""

    todo_file: str = "~/todo.txt"
    encoding: str = "utf-8"
    auto_date: bool = True  # stamp new todos with a creation date

    def __post_init__(self):
        self.todo_file = os.path.expanduser(self.todo_file)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))

        return cls(**{key: value for key, value in data.items() if key in known})

    def get_todo_path(self) -> Path:
        return Path(self.todo_file)


def get_config_path() -> Path:
    """Config file location, overridable with ``TODO_TXT_CONFIG``."""
    return Path(os.path.expanduser(os.environ.get("TODO_TXT_CONFIG", DEFAULT_CONFIG_PATH)))


class Config:
    """Configuration manager for todo-txt."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, falling back to defaults.

        ``TODO_FILE`` in the environment takes precedence over the file's
        ``todo_file`` setting.
        """
        if config_path is None:
            config_path = get_config_path()

        config = ConfigModel()
        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    config = ConfigModel.from_yaml(f.read())
                logger.debug("Loaded configuration from %s", config_path)
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning("Failed to load config from %s: %s; using defaults", config_path, e)
                config = ConfigModel()

        env_file = os.environ.get("TODO_FILE")
        if env_file:
            config.todo_file = os.path.expanduser(env_file)

        cls._instance = config
        return config

    @classmethod
    def get(cls) -> ConfigModel:
        """Cached configuration, loaded on first use."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance


def get_config() -> ConfigModel:
    """Configuration for this process, loaded from the default location once."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load ``config_path`` (or the default location) and make it current."""
    return Config.load(config_path)

