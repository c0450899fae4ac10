"""OpenAI completions HTTP client.

Posts a prompt to the OpenAI ``/v1/completions`` endpoint and returns the text
of the first choice. One request per call: no retries, no streaming.
"""
from typing import Any, Optional

import requests
from loguru import logger
from pydantic import ValidationError

from errors import (
    ConfigurationError,
    DecodeError,
    HTTPStatusError,
    NetworkError,
    NoChoicesError,
    SerializationError,
)
from providers.schema import CompletionRequest, CompletionResponse
from utils.provider_resolver import DEFAULTS, resolve_provider_url
from validation import validate_completion_request


API_URL = DEFAULTS['openai']
DEFAULT_MODEL = "text-davinci-003"
DEFAULT_TEMPERATURE = 0.8
DEFAULT_MAX_TOKENS = 2000
DEFAULT_TIMEOUT = 30


class CompletionClient:
    """Client for a single text-completion round trip.

    The credential and generation parameters are fixed at construction time;
    ``complete`` only varies the prompt and, optionally, the model.

    Attributes:
        api_key (str): Bearer token sent in the Authorization header
        model (str): Model used when ``complete`` is called with an empty model
        temperature (float): Sampling temperature sent with every request
        max_tokens (int): Maximum number of tokens to generate
        timeout (float): Seconds before the HTTP round trip is abandoned
        url (str): Completions endpoint

    Example:
        client = CompletionClient(api_key=os.environ["OPENAI_API_KEY"])
        print(client.complete("Say hello"))
    """

    def __init__(self,
                 api_key: Optional[str],
                 model: str = DEFAULT_MODEL,
                 temperature: float = DEFAULT_TEMPERATURE,
                 max_tokens: int = DEFAULT_MAX_TOKENS,
                 timeout: float = DEFAULT_TIMEOUT,
                 url: str = API_URL):
        self.api_key = api_key
        self.model = model or DEFAULT_MODEL
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.timeout = timeout
        self.url = url

    @classmethod
    def from_config(cls, cfg: Any, api_key: Optional[str]) -> "CompletionClient":
        """Build a client from the ``openai`` section of a loaded configuration.

        The endpoint honours the ``OPENAI_URL`` environment override.
        """
        openai_cfg = cfg.openai
        return cls(
            api_key=api_key,
            model=openai_cfg.model,
            temperature=openai_cfg.temperature,
            max_tokens=openai_cfg.max_tokens,
            timeout=openai_cfg.timeout,
            url=resolve_provider_url('openai', cfg),
        )

    def build_request(self, prompt: str, model: str = "") -> CompletionRequest:
        """Build the request model; invalid parameters raise SerializationError."""
        try:
            return CompletionRequest(
                prompt=prompt,
                model=model or self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except ValidationError as e:
            raise SerializationError(f"Invalid completion request: {e}") from e

    def complete(self, prompt: str, model: str = "") -> str:
        """Generate a completion for ``prompt`` and return the first choice's text.

        Args:
            prompt (str): Input text, may be empty
            model (str): Model identifier; empty selects the client's default

        Returns:
            str: Text of the first returned choice

        Raises:
            ConfigurationError: No credential configured (raised before any network call)
            SerializationError: The request payload failed validation
            NetworkError: Connection failure or timeout
            HTTPStatusError: Non-2xx response
            DecodeError: Response body is not a valid completion response
            NoChoicesError: Response contained an empty choice list
        """
        if not self.api_key:
            raise ConfigurationError("OpenAI API key not set")

        request = self.build_request(prompt, model)
        payload = request.model_dump()
        validate_completion_request(payload)

        headers = {"Authorization": f"Bearer {self.api_key}", "Content-Type": "application/json"}

        logger.debug("Sending completion request",
                     url=self.url,
                     model=request.model,
                     prompt_chars=len(prompt),
                     max_tokens=request.max_tokens)

        try:
            resp = requests.post(self.url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning("Completion request failed", url=self.url, error=str(e))
            raise NetworkError(f"request to {self.url} failed: {e}") from e

        if not 200 <= resp.status_code < 300:
            logger.warning("Completion API returned error status", status_code=resp.status_code)
            raise HTTPStatusError(resp.status_code, getattr(resp, 'reason', None))

        completion = self._decode(resp)

        choices = completion.choices or []
        if not choices:
            raise NoChoicesError()

        first = choices[0]
        logger.debug("Completion received",
                     response_id=completion.id or "unknown",
                     choices=len(choices),
                     finish_reason=first.finish_reason or "unknown")
        return first.text or ""

    @staticmethod
    def _decode(resp) -> CompletionResponse:
        try:
            data = resp.json()
        except ValueError as e:
            raise DecodeError(f"response body is not valid JSON: {e}") from e

        try:
            return CompletionResponse.model_validate(data)
        except ValidationError as e:
            raise DecodeError(f"unexpected completion response shape: {e}") from e


def complete(api_key: Optional[str], prompt: str, model: str = "", timeout: float = DEFAULT_TIMEOUT) -> str:
    """Single-call helper: complete ``prompt`` with default generation parameters."""
    client = CompletionClient(api_key=api_key, timeout=timeout)
    return client.complete(prompt, model)
