"""
Loguru setup for the text completer.

stdout is reserved for the completion text, so every sink writes to stderr or
to the optional log file. The API credential is masked in messages and bound
context before any sink sees the record.
"""

import sys
from pathlib import Path
from typing import Iterable

from loguru import logger
from omegaconf import DictConfig

from errors import ConfigurationError


CONSOLE_FORMATS = {
    "simple": "<level>{level}</level> - {message}",
    "detailed": "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    "json": "{time:HH:mm:ss} | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> | {message} | {extra}",
}

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}"

MASK = "***"


def _masking_filter(secrets: Iterable[str]):
    secrets = [s for s in secrets if s]

    def _filter(record) -> bool:
        for secret in secrets:
            if secret in record["message"]:
                record["message"] = record["message"].replace(secret, MASK)
            for key, value in record["extra"].items():
                if isinstance(value, str) and secret in value:
                    record["extra"][key] = value.replace(secret, MASK)
        return True

    return _filter


def setup_logging(cfg: DictConfig, secrets: Iterable[str] = ()) -> None:
    """Replace loguru's default handler with the configured sinks.

    Args:
        cfg: Configuration with a ``logging`` section (level, format, file,
            rotation, retention, colorize)
        secrets: Values to mask in every record, typically the API key

    Raises:
        ConfigurationError: The log file cannot be created or opened
    """
    log_config = cfg.logging
    level = log_config.level.upper()
    mask = _masking_filter(secrets)

    logger.remove()
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMATS.get(log_config.format, CONSOLE_FORMATS["detailed"]),
        level=level,
        colorize=log_config.get("colorize", True),
        filter=mask,
        diagnose=False,
    )

    if log_config.file:
        file_path = Path(log_config.file)
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            logger.add(
                file_path,
                format=FILE_FORMAT,
                level=level,
                filter=mask,
                rotation=log_config.get("rotation", "100 MB"),
                retention=log_config.get("retention", "30 days"),
                compression="gz",
                serialize=log_config.format == "json",
                diagnose=False,
            )
        except OSError as e:
            raise ConfigurationError(f"Cannot open log file {file_path}: {e}") from e

    logger.debug("Logging configured", level=level, format=log_config.format,
                 file=log_config.file or "console-only")
