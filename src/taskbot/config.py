"""Configuration management for taskbot."""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)


@dataclass
class ConfigModel:
    """Global configuration model for taskbot."""

    # File paths
    data_dir: str = "~/.taskbot"
    data_file: str = "tasks.txt"  # relative paths live inside data_dir

    # Storage behaviour
    strict_load: bool = False  # abort on a corrupt record instead of skipping it

    # Logging
    log_level: str = "WARNING"
    log_file: Optional[str] = "taskbot.log"

    # UI
    no_color: bool = False

    def __post_init__(self):
        """Post-initialization setup."""
        self.data_dir = os.path.expanduser(self.data_dir)

    def ensure_directories(self) -> None:
        """Create the data directory once this config is the one in use."""
        Path(self.data_dir).mkdir(parents=True, exist_ok=True)

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        data = {
            "data_dir": self.data_dir,
            "data_file": self.data_file,
            "strict_load": self.strict_load,
            "log_level": self.log_level,
            "log_file": self.log_file,
            "no_color": self.no_color,
        }
        return yaml.dump(data, default_flow_style=False)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML, ignoring unknown keys."""
        data = yaml.safe_load(yaml_str) or {}
        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping")

        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Ignoring unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def get_data_path(self) -> Path:
        """Get the path of the task data file."""
        return self._resolve(self.data_file)

    def get_log_path(self) -> Optional[Path]:
        """Get the log file path, or None when file logging is off."""
        if not self.log_file:
            return None
        return self._resolve(self.log_file)

    def get_config_path(self) -> Path:
        """Get the config file path."""
        return Path(self.data_dir) / "config.yaml"

    def _resolve(self, name: str) -> Path:
        path = Path(name).expanduser()
        if path.is_absolute():
            return path
        return Path(self.data_dir) / path


class Config:
    """Configuration manager for taskbot."""

    _instance: Optional[ConfigModel] = None

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Load configuration from file or create default."""
        if cls._instance is not None:
            return cls._instance

        config = ConfigModel()

        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path).expanduser()

        if config_path.exists():
            try:
                with open(config_path, "r", encoding="utf-8") as f:
                    yaml_content = f.read()
                config = ConfigModel.from_yaml(yaml_content)
                logger.debug(f"Loaded configuration from {config_path}")
            except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load config from {config_path}: {e}. Using default configuration.")
        else:
            cls.save(config, config_path)
            logger.debug(f"Created default configuration at {config_path}")

        cls._instance = config
        return config

    @classmethod
    def save(cls, config: ConfigModel, config_path: Optional[Path] = None) -> None:
        """Save configuration to file."""
        if config_path is None:
            config_path = config.get_config_path()
        config_path = Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(config.to_yaml())
            logger.debug(f"Configuration saved to {config_path}")
        except OSError as e:
            logger.error(f"Failed to save config to {config_path}: {e}")

    @classmethod
    def get(cls) -> ConfigModel:
        """Get the current configuration instance."""
        if cls._instance is None:
            cls._instance = cls.load()
        return cls._instance

    @classmethod
    def reload(cls, config_path: Optional[Path] = None) -> ConfigModel:
        """Reload configuration from file."""
        cls._instance = None
        return cls.load(config_path)


def get_config() -> ConfigModel:
    """Get the current configuration."""
    return Config.get()


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from file."""
    return Config.load(config_path)


def save_config(config: ConfigModel, config_path: Optional[Path] = None) -> None:
    """Save configuration to file."""
    Config.save(config, config_path)
