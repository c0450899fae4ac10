"""
Configuration schema validation for the text completer.

This module defines dataclasses that provide type safety and validation
for configuration files. Used with Hydra and OmegaConf for robust
configuration management.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class OpenAIConfig:
    """OpenAI completions API configuration settings."""
    model: str = "text-davinci-003"
    url: str = "https://api.openai.com/v1/completions"
    api_key_env: str = "OPENAI_API_KEY"
    max_tokens: int = 2000
    temperature: float = 0.8
    timeout: int = 30

    def __post_init__(self):
        """Validate OpenAI configuration values."""
        if not self.model:
            raise ValueError("OpenAI model must not be empty")
        if not self.url.startswith(("http://", "https://")):
            raise ValueError("OpenAI url must be an http(s) URL")
        if not self.api_key_env:
            raise ValueError("OpenAI api_key_env must name an environment variable")
        if self.max_tokens < 1:
            raise ValueError("OpenAI max_tokens must be at least 1")
        if not (0.0 <= self.temperature <= 2.0):
            raise ValueError("OpenAI temperature must be between 0.0 and 2.0")
        if self.timeout < 1:
            raise ValueError("OpenAI timeout must be at least 1 second")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    format: str = "simple"  # simple, detailed, json
    file: Optional[str] = None
    rotation: str = "100 MB"
    retention: str = "30 days"
    colorize: bool = True

    def __post_init__(self):
        """Validate logging configuration values."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if self.level.upper() not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        self.level = self.level.upper()

        valid_formats = ["simple", "detailed", "json"]
        if self.format not in valid_formats:
            raise ValueError(f"Invalid log format. Must be one of: {valid_formats}")


@dataclass
class CompleterConfig:
    """Complete configuration for the text completer."""
    openai: OpenAIConfig = field(default_factory=OpenAIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    prompt_label: str = "Enter prompt: "
