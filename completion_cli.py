#!/usr/bin/env python3
"""
Text completer command line

Reads one prompt line from standard input, sends it to the OpenAI completions
API and prints the first completion to standard output. Errors are printed to
standard error and the process exits with status 1.

Example Usage:
    # Prompt interactively
    OPENAI_API_KEY=sk-... python3 completion_cli.py

    # Pipe a prompt and override configuration with Hydra syntax
    echo "Write a haiku" | python3 completion_cli.py openai.model=gpt-3.5-turbo-instruct logging.level=DEBUG
"""

import sys
from typing import List, Optional, TextIO

from loguru import logger

from config_manager import ConfigManager, get_api_key
from errors import CompletionError, ConfigurationError
from logging_manager import setup_logging
from providers import CompletionClient


def read_prompt(stream: TextIO, label: str = "", out: Optional[TextIO] = None) -> str:
    """Read a single prompt line, trimming surrounding whitespace.

    The label is only shown when ``stream`` is an interactive terminal.
    """
    if label and stream.isatty():
        out = out or sys.stdout
        out.write(label)
        out.flush()
    return stream.readline().strip()


def main(argv: Optional[List[str]] = None,
         stdin: Optional[TextIO] = None,
         config_manager: Optional[ConfigManager] = None) -> int:
    """Run one completion. Returns the process exit status.

    Args:
        argv: Hydra-style overrides (``openai.model=gpt-x``); defaults to sys.argv[1:]
        stdin: Prompt source; defaults to sys.stdin
        config_manager: Loader for the YAML configuration
    """
    argv = sys.argv[1:] if argv is None else argv
    stdin = stdin or sys.stdin
    config_manager = config_manager or ConfigManager()

    try:
        cfg = config_manager.load_config("default", list(argv))
        api_key = get_api_key(cfg)
        setup_logging(cfg, secrets=[api_key] if api_key else [])
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return 1

    logger.debug("Configuration loaded", **config_manager.get_config_summary(cfg))

    client = CompletionClient.from_config(cfg, api_key=api_key)

    prompt = read_prompt(stdin, cfg.prompt_label)

    try:
        text = client.complete(prompt)
    except CompletionError as e:
        logger.debug("Completion failed", error_type=type(e).__name__)
        print(e, file=sys.stderr)
        return 1

    print(text)
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
