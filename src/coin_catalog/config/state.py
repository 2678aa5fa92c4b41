"""
Unified configuration state.

Single source of truth for application configuration, combining YAML files
from a config directory with environment overrides, type validation and
sensible defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


# =============================================================================
# PYDANTIC MODELS - Type-Safe Configuration
# =============================================================================


class CatalogConfig(BaseModel):
    """Remote catalog API configuration."""

    model_config = ConfigDict(extra="allow")

    base_url: str = Field(default="https://api.blocksdecoded.com")
    app_platform: str = Field(default="python")
    app_version: str = Field(default="0.3.0")
    app_id: str | None = Field(default=None)
    api_key: str | None = Field(default=None)
    timeout: float = Field(default=30.0, gt=0)
    max_attempts: int = Field(default=3, ge=1, le=20)
    retry_base_delay: float = Field(default=1.0, ge=0)

    @field_validator("base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if v.startswith(("http://", "https://")):
            return v.rstrip("/")
        raise ValueError("Catalog base_url must start with http:// or https://")


class StorageConfig(BaseModel):
    """Where the dataset and sync state live."""

    model_config = ConfigDict(extra="allow")

    data_dir: str = Field(default="./data")
    dataset_file: str = Field(default="catalog.json")
    state_dir: str = Field(default="state")
    snapshot_dir: str | None = Field(
        default=None, description="Directory with coins/blockchains/tokens.json; packaged dumps when unset"
    )

    @property
    def dataset_path(self) -> Path:
        return Path(self.data_dir) / self.dataset_file

    @property
    def state_path(self) -> Path:
        return Path(self.data_dir) / self.state_dir


class SyncConfig(BaseModel):
    """Bootstrap and merge settings."""

    model_config = ConfigDict(extra="allow")

    bootstrap_version: int = Field(default=3, ge=1)
    overrides_file: str | None = Field(
        default=None, description="YAML override table; packaged table when unset"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="allow")

    level: str = Field(default="INFO")
    json_logs: bool = Field(default=True)


class ConfigState(BaseModel):
    """Root configuration state."""

    model_config = ConfigDict(extra="allow")

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    sync: SyncConfig = Field(default_factory=SyncConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    env: str = Field(default="dev")
    config_dir: str = Field(default="./config")


# =============================================================================
# CONFIG LOADER
# =============================================================================


class ConfigLoader:
    """
    Load and validate configuration from YAML files.

    Merges:
      1. Defaults (model fields)
      2. catalog.yaml, storage.yaml, sync.yaml, logging.yaml from config_dir
      3. env/<env>.yaml
      4. Environment variable overrides
    """

    CONFIG_FILES = ("catalog.yaml", "storage.yaml", "sync.yaml", "logging.yaml")

    def __init__(self, config_dir: str = "./config", env: str | None = None):
        self.config_dir = Path(config_dir)
        self.env = env or os.getenv("COIN_CATALOG_ENV", "dev")

    def _load_yaml(self, path: Path) -> dict[str, Any]:
        if not path.exists():
            logger.debug(f"Config file not found (using defaults): {path}")
            return {}

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load {path}: {e}")
            return {}

        if not isinstance(data, dict):
            logger.error(f"Ignoring {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, config: dict[str, Any]) -> dict[str, Any]:
        """Apply environment variable overrides to config."""
        if base_url := os.getenv("CATALOG_BASE_URL"):
            config.setdefault("catalog", {})["base_url"] = base_url

        if api_key := os.getenv("CATALOG_API_KEY"):
            config.setdefault("catalog", {})["api_key"] = api_key

        if app_id := os.getenv("CATALOG_APP_ID"):
            config.setdefault("catalog", {})["app_id"] = app_id

        if data_dir := os.getenv("COIN_CATALOG_DATA_DIR"):
            config.setdefault("storage", {})["data_dir"] = data_dir

        if log_level := os.getenv("LOG_LEVEL"):
            config.setdefault("logging", {})["level"] = log_level

        return config

    def _merge_dicts(self, base: dict, override: dict) -> dict:
        """Deep merge override into base dict."""
        result = base.copy()
        for key, value in override.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_dicts(result[key], value)
            else:
                result[key] = value
        return result

    def load(self) -> ConfigState:
        """
        Load complete configuration state.

        Raises:
            pydantic.ValidationError: If configuration is invalid
        """
        logger.info(f"Loading configuration from {self.config_dir} (env: {self.env})")

        config: dict[str, Any] = {}
        for config_file in self.CONFIG_FILES:
            config = self._merge_dicts(config, self._load_yaml(self.config_dir / config_file))

        env_config = self._load_yaml(self.config_dir / "env" / f"{self.env}.yaml")
        config = self._merge_dicts(config, env_config)

        config = self._apply_env_overrides(config)

        # env and config_dir come from the loader, not from file content
        for reserved in ("env", "config_dir"):
            if reserved in config:
                logger.warning(f"Ignoring top-level '{reserved}' key in config files")
                config.pop(reserved)

        try:
            return ConfigState(env=self.env, config_dir=str(self.config_dir), **config)
        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            raise


def get_config(config_dir: str | None = None) -> ConfigState:
    """
    Load and return the configuration state.

    Args:
        config_dir: Override config directory. Defaults to $COIN_CATALOG_CONFIG_DIR or ./config
    """
    if config_dir is None:
        config_dir = os.getenv("COIN_CATALOG_CONFIG_DIR", "./config")
        if not Path(config_dir).exists():
            logger.warning(f"Config directory not found at {config_dir}, using defaults")

    return ConfigLoader(config_dir=config_dir).load()


__all__ = [
    "CatalogConfig",
    "ConfigLoader",
    "ConfigState",
    "LoggingConfig",
    "StorageConfig",
    "SyncConfig",
    "get_config",
]
