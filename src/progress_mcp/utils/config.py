"""
Configuration loader for the progress MCP server.

This module provides configuration management with:
- Multiple configuration sources (JSON, YAML, TOML files, dicts, env vars)
- Schema validation through pydantic
- Type coercion for environment values
- Priority-based merging
"""

import os
import json
from pathlib import Path
from typing import Optional, Dict, Any, List, Union
import yaml
import toml
from pydantic import BaseModel, Field, field_validator, ValidationError, ConfigDict

from .logging import get_logger
from .errors import ConfigurationError


logger = get_logger("progress-mcp.config")

ENV_PREFIX = "PROGRESS_MCP_"
ENV_NESTING = "__"


class ConfigSource(BaseModel):
    """Configuration source definition."""
    path: Optional[Path] = None
    data: Dict[str, Any] = Field(default_factory=dict)
    priority: int = 0
    source_type: str = "dict"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = "INFO"
    format: str = "console"
    directory: Optional[Path] = None
    max_size: int = 10 * 1024 * 1024  # 10MB
    backup_count: int = 5

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator('format')
    @classmethod
    def validate_format(cls, v):
        if v not in ("console", "json"):
            raise ValueError(f"Invalid log format: {v}")
        return v


class ToolConfig(BaseModel):
    """Long-running tool configuration."""
    default_seconds: int = Field(default=5, ge=0)
    # Wall-clock length of one progress step.
    tick_interval: float = Field(default=1.0, gt=0)


class ServerConfig(BaseModel):
    """Main server configuration."""
    app_name: str = "test-mcp-server"
    version: str = "1.0.0"

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tool: ToolConfig = Field(default_factory=ToolConfig)

    model_config = ConfigDict(validate_assignment=True)


class ConfigLoader:
    """Configuration loader with multiple source support."""

    def __init__(self, env_prefix: str = ENV_PREFIX):
        self.env_prefix = env_prefix
        self._sources: List[ConfigSource] = []
        self._config: Optional[ServerConfig] = None

    def add_source(
        self,
        source: Union[str, Path, Dict[str, Any]],
        priority: int = 0,
        source_type: Optional[str] = None
    ) -> None:
        """
        Add configuration source.

        Args:
            source: Configuration source (file path or dict)
            priority: Source priority (higher wins)
            source_type: Source type (auto-detected if None)
        """
        if isinstance(source, (str, Path)):
            path = Path(source).expanduser()
            if not source_type:
                source_type = self._detect_source_type(path)

            self._sources.append(ConfigSource(
                path=path,
                priority=priority,
                source_type=source_type
            ))
        else:
            self._sources.append(ConfigSource(
                data=source,
                priority=priority,
                source_type="dict"
            ))

        self._sources.sort(key=lambda s: s.priority)

    def _detect_source_type(self, path: Path) -> str:
        """Detect configuration file type."""
        suffix = path.suffix.lower()
        if suffix == ".json":
            return "json"
        elif suffix in (".yaml", ".yml"):
            return "yaml"
        elif suffix == ".toml":
            return "toml"
        else:
            raise ConfigurationError(f"Unknown config file type: {suffix}")

    def load(self) -> ServerConfig:
        """
        Load configuration from all sources.

        Sources are merged lowest priority first, so higher priorities win.
        Environment variables are applied last.

        Returns:
            Merged configuration
        """
        merged_data: Dict[str, Any] = {}

        for source in self._sources:
            data = self._load_source(source)
            merged_data = self._deep_merge(merged_data, data)

        merged_data = self._deep_merge(merged_data, self._load_env_vars())

        try:
            self._config = ServerConfig(**merged_data)
        except ValidationError as e:
            errors = []
            for error in e.errors():
                field = ".".join(str(x) for x in error["loc"])
                errors.append(f"{field}: {error['msg']}")

            raise ConfigurationError(
                f"Configuration validation failed: {'; '.join(errors)}",
                cause=e
            ) from e

        logger.debug("configuration_loaded", sources=len(self._sources))
        return self._config

    def _load_source(self, source: ConfigSource) -> Dict[str, Any]:
        """Load data from a configuration source."""
        if source.path is None:
            return source.data

        if not source.path.exists():
            logger.warning("config_file_not_found", path=str(source.path))
            return {}

        try:
            content = source.path.read_text()
            if source.source_type == "json":
                data = json.loads(content)
            elif source.source_type == "yaml":
                data = yaml.safe_load(content)
            elif source.source_type == "toml":
                data = toml.loads(content)
            else:
                raise ConfigurationError(f"Unknown source type: {source.source_type}")
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to read config file {source.path}: {e}",
                cause=e
            ) from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {source.path} must contain a mapping"
            )
        return data

    def _load_env_vars(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        result: Dict[str, Any] = {}

        for key, value in os.environ.items():
            if not key.startswith(self.env_prefix):
                continue

            parts = key[len(self.env_prefix):].lower().split(ENV_NESTING)
            current = result
            for part in parts[:-1]:
                current = current.setdefault(part, {})

            current[parts[-1]] = self._convert_value(value)

        return result

    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type."""
        if value.lower() in ("true", "yes", "on"):
            return True
        elif value.lower() in ("false", "no", "off"):
            return False

        try:
            if "." in value:
                return float(value)
            else:
                return int(value)
        except ValueError:
            pass

        return value

    def _deep_merge(self, base: Dict[str, Any], update: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in update.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get_config(self) -> ServerConfig:
        """Get current configuration."""
        if self._config is None:
            raise ConfigurationError("Configuration not loaded")
        return self._config


DEFAULT_CONFIG_PATHS = [
    Path.home() / ".progress-mcp" / "config.yaml",
    Path.home() / ".progress-mcp" / "config.json",
    Path("./progress-mcp.yaml"),
    Path("./progress-mcp.json"),
    Path("./progress-mcp.toml"),
]


def load_config(
    config_paths: Optional[List[Union[str, Path]]] = None,
    extra_config: Optional[Dict[str, Any]] = None
) -> ServerConfig:
    """
    Load configuration from standard locations.

    Args:
        config_paths: Additional configuration paths
        extra_config: Extra configuration to merge

    Returns:
        Loaded configuration
    """
    loader = ConfigLoader()

    for path in DEFAULT_CONFIG_PATHS:
        if path.exists():
            loader.add_source(path, priority=10)

    if config_paths:
        for i, path in enumerate(config_paths):
            loader.add_source(path, priority=20 + i)

    if extra_config:
        loader.add_source(extra_config, priority=100)

    return loader.load()


__all__ = [
    'ServerConfig',
    'LoggingConfig',
    'ToolConfig',
    'ConfigLoader',
    'load_config',
]
