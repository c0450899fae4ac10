"""Completion provider clients.

Re-exports the OpenAI completions client and its wire schema so callers can
``from providers import CompletionClient``.
"""
from providers.openai_client import (
    API_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    DEFAULT_TIMEOUT,
    CompletionClient,
    complete,
)
from providers.schema import Choice, CompletionRequest, CompletionResponse

__all__ = [
    "API_URL",
    "DEFAULT_MAX_TOKENS",
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "DEFAULT_TIMEOUT",
    "Choice",
    "CompletionClient",
    "CompletionRequest",
    "CompletionResponse",
    "complete",
]
