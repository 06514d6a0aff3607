"""Configuration management for TaskSeed."""

import json
from pathlib import Path
from typing import Any, Literal, Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field, ValidationError

from taskseed.errors import ConfigurationError
from taskseed.services.vocabulary import DEFAULT_TASK_COUNT


class DatabaseConfig(BaseModel):
    """Connection parameters for the task store."""

    driver: Literal["sqlite", "postgresql"] = Field(default="sqlite")
    path: Optional[str] = Field(default=None, description="SQLite database file")
    url: Optional[str] = Field(default=None, description="PostgreSQL DSN or URI")
    host: str = Field(default="localhost")
    port: int = Field(default=5432, ge=1, le=65535)
    name: Optional[str] = Field(default=None, description="Database name")
    user: Optional[str] = Field(default=None)
    password: Optional[str] = Field(default=None)
    connect_timeout: int = Field(default=10, ge=1)
    connect_retries: int = Field(default=2, ge=0)

    def check_complete(self) -> None:
        """Ensure the parameters the selected driver needs are present."""
        if self.driver == "sqlite":
            if not self.path:
                raise ConfigurationError(
                    "database.path is required for the sqlite driver"
                )
            return

        if not self.url and not self.name:
            raise ConfigurationError(
                "database.url or database.name is required for the postgresql driver"
            )
        if not self.url and not self.user:
            raise ConfigurationError(
                "database.user is required for the postgresql driver"
            )

    def describe(self) -> str:
        """Describe the target store without credentials."""
        if self.driver == "sqlite":
            return f"sqlite:{self.path}"
        if self.url:
            return "postgresql:<dsn>"
        return f"postgresql://{self.host}:{self.port}/{self.name}"


class GeneratorConfig(BaseModel):
    """Synthetic generation defaults."""

    count: int = Field(default=DEFAULT_TASK_COUNT, ge=0)
    seed: Optional[int] = Field(default=None)
    with_users: bool = Field(default=False)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: Literal["table", "json", "yaml", "quiet"] = Field(default="table")


class Config(BaseModel):
    """Main configuration."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


class ConfigManager:
    """Manages TaskSeed configuration profiles."""

    def __init__(self, profile: str = "default", config_dir: str | Path | None = None):
        self.profile = profile
        if config_dir is None:
            config_dir = user_config_dir("taskseed")
        self.config_dir = Path(config_dir)
        self.config_file = self.config_dir / f"{profile}.json"

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file, defaults when no file exists."""
        if not self.config_file.exists():
            return Config()

        try:
            with open(self.config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
            return Config(**data)
        except (OSError, json.JSONDecodeError, TypeError) as e:
            raise ConfigurationError(
                f"Cannot read config file {self.config_file}: {e}"
            ) from e
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid config file {self.config_file}: {e}"
            ) from e

    def save_config(self, config: Optional[Config] = None) -> None:
        """Save configuration to file."""
        if config is None:
            config = self.config

        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w", encoding="utf-8") as f:
            json.dump(config.model_dump(), f, indent=2)

    def get(self, key: str) -> Any:
        """Get a configuration value by dot-separated key."""
        keys = key.split(".")
        value: Any = self.config
        for k in keys:
            if isinstance(value, BaseModel):
                value = getattr(value, k, None)
            else:
                return None
        return value

    def set(self, key: str, value: Any) -> None:
        """Set a configuration value by dot-separated key."""
        keys = key.split(".")
        config_dict = self.config.model_dump()

        # Only known sections and fields may be set
        current = config_dict
        for k in keys[:-1]:
            if not isinstance(current.get(k), dict):
                raise ConfigurationError(f"Unknown configuration key: {key}")
            current = current[k]
        if keys[-1] not in current:
            raise ConfigurationError(f"Unknown configuration key: {key}")

        current[keys[-1]] = value

        try:
            self._config = Config(**config_dict)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid value for {key}: {e}") from e
        self.save_config()

    def reset(self, key: Optional[str] = None) -> None:
        """Reset configuration to defaults."""
        if key is None:
            self._config = Config()
            self.save_config()
            return

        default_value = self.get_from_config(Config(), key)
        self.set(key, default_value)

    @staticmethod
    def get_from_config(config: Config, key: str) -> Any:
        """Get a value from a specific config object by dot-separated key."""
        value: Any = config
        for k in key.split("."):
            if not isinstance(value, BaseModel) or k not in type(value).model_fields:
                raise ConfigurationError(f"Unknown configuration key: {key}")
            value = getattr(value, k)
        return value


# Global config manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get or create the global config manager."""
    global _config_manager
    if _config_manager is None or _config_manager.profile != profile:
        _config_manager = ConfigManager(profile)
    return _config_manager
