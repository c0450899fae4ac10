#!/usr/bin/env python3
"""
Configuration Manager for the text completer

Provides centralized configuration management using Hydra and OmegaConf frameworks.
Handles configuration validation, command-line overrides and credential lookup.

Features:
- YAML-based hierarchical configuration files
- Type-safe configuration validation with dataclasses
- Command-line parameter overrides with nested dot notation
- Configuration schema validation with helpful error messages

Dependencies:
- hydra-core: Configuration management framework by Facebook
- omegaconf: Configuration objects with validation
"""

from pathlib import Path
from typing import List, Optional, Dict, Any
import os

from hydra import compose, initialize_config_dir
from hydra.core.global_hydra import GlobalHydra
from omegaconf import DictConfig, OmegaConf

from config.schema import CompleterConfig
from errors import ConfigurationError


class ConfigManager:
    """Centralized configuration management using Hydra and OmegaConf frameworks.

    Attributes:
        config_dir (Path): Directory containing configuration files
        config (DictConfig): Currently loaded configuration
        schema_class: Configuration schema class for validation

    Example:
        config_manager = ConfigManager()
        config = config_manager.load_config("default", ["openai.model=gpt-x"])
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize the configuration manager.

        Args:
            config_dir (Path, optional): Directory containing config files.
                                       Defaults to ./config/
        """
        if config_dir is None:
            config_dir = Path(__file__).parent / "config"

        self.config_dir = config_dir
        self.config: Optional[DictConfig] = None
        self.schema_class = CompleterConfig

    def load_config(self,
                    config_name: str = "default",
                    overrides: Optional[List[str]] = None) -> DictConfig:
        """Load configuration from YAML files with optional overrides.

        Args:
            config_name (str): Name of the configuration file to load
            overrides (List[str], optional): Command-line parameter overrides
                                           in dot notation (e.g., "openai.timeout=10")

        Returns:
            DictConfig: Loaded and validated configuration object

        Raises:
            ConfigurationError: If configuration files are not found or invalid
        """
        if overrides is None:
            overrides = []

        # Clear any existing Hydra global state
        if GlobalHydra().is_initialized():
            GlobalHydra.instance().clear()

        config_dir_absolute = self.config_dir.resolve()

        try:
            with initialize_config_dir(
                config_dir=str(config_dir_absolute),
                version_base=None
            ):
                config = compose(
                    config_name=config_name,
                    overrides=overrides
                )
        except Exception as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        self.config = self.validate_config(config)
        return self.config

    def validate_config(self, config: DictConfig) -> DictConfig:
        """Validate configuration against the dataclass schema.

        Merges the loaded values into the structured schema (type checking) and
        instantiates the dataclasses so their ``__post_init__`` checks run.

        Args:
            config (DictConfig): Configuration object to validate

        Returns:
            DictConfig: The schema-typed merged configuration

        Raises:
            ConfigurationError: If configuration validation fails
        """
        try:
            structured_config = OmegaConf.structured(self.schema_class)
            validated_config = OmegaConf.merge(structured_config, config)
            OmegaConf.to_object(validated_config)
        except Exception as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        return validated_config

    def get_config_summary(self, config: DictConfig) -> Dict[str, Any]:
        """Get a summary of current configuration for logging/debugging.

        The credential itself is never included, only whether it is present.
        """
        return {
            "openai_model": config.openai.model,
            "openai_url": config.openai.url,
            "openai_timeout": config.openai.timeout,
            "openai_max_tokens": config.openai.max_tokens,
            "openai_temperature": config.openai.temperature,
            "api_key_present": bool(get_api_key(config)),
            "logging_level": config.logging.level,
            "logging_format": config.logging.format,
        }


def get_api_key(config: DictConfig) -> Optional[str]:
    """Read the API credential from the environment variable named in config.

    Returns None when the variable is unset or empty; the client turns that
    into a ConfigurationError before any network call.
    """
    return os.environ.get(config.openai.api_key_env) or None
