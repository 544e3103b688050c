"""Configuration management for Project Hub."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .todo import TodoPriority

logger = logging.getLogger(__name__)

HOME_ENV_VAR = "PROJECT_HUB_HOME"


def default_data_dir() -> str:
    return os.environ.get(HOME_ENV_VAR, "~/.project-hub")


@dataclass
class ConfigModel:
    """Global configuration model for Project Hub."""

    # Storage locations
    data_dir: str = ""
    todos_file: str = "todos.md"
    ui_state_file: str = "ui-state.yaml"

    # Defaults for new todos
    default_priority: TodoPriority = TodoPriority.MEDIUM

    # Search
    search_cutoff: int = 60
    search_limit: int = 10

    # Output
    log_level: str = "WARNING"
    no_color: bool = False

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir or default_data_dir())

        if isinstance(self.default_priority, str):
            self.default_priority = TodoPriority(self.default_priority)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "todos_file": self.todos_file,
            "ui_state_file": self.ui_state_file,
            "default_priority": self.default_priority.value,
            "search_cutoff": self.search_cutoff,
            "search_limit": self.search_limit,
            "log_level": self.log_level,
            "no_color": self.no_color,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        data = yaml.safe_load(yaml_str) or {}

        if "default_priority" in data:
            try:
                data["default_priority"] = TodoPriority(data["default_priority"])
            except ValueError:
                logger.warning(f"Unknown default priority {data['default_priority']!r}, using medium")
                data["default_priority"] = TodoPriority.MEDIUM

        known = set(cls.__dataclass_fields__)
        return cls(**{key: value for key, value in data.items() if key in known})

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def get_todos_path(self) -> Path:
        """Get the todo store path."""
        return Path(self.data_dir) / self.todos_file

    def get_ui_state_path(self) -> Path:
        """Get the saved UI preferences path."""
        return Path(self.data_dir) / self.ui_state_file


class Config:
    """Configuration manager for Project Hub."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file, or use defaults when there is none."""
        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()

        if config_path.exists():
            try:
                with open(config_path, 'r') as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, yaml.YAMLError, TypeError, ValueError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
                config = ConfigModel()

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            f.write(config.to_yaml())
        logger.debug(f"Configuration saved to {config_path}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load()

    @classmethod
    def reset(cls) -> None:
        """Forget the cached configuration."""
        cls._instance = None


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
