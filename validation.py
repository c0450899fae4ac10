"""Schema validation helpers for outgoing completion requests.

Provides a JSON Schema for the completions payload and a helper to validate it
before it leaves the process.
"""
from jsonschema import validate, ValidationError

from errors import SerializationError


COMPLETION_REQUEST_SCHEMA = {
    "type": "object",
    "required": ["prompt", "model", "temperature", "max_tokens"],
    "properties": {
        "prompt": {"type": "string"},
        "model": {"type": "string", "minLength": 1},
        "temperature": {"type": "number", "minimum": 0, "maximum": 2},
        "max_tokens": {"type": "integer", "minimum": 1},
    },
    "additionalProperties": False,
}


def validate_completion_request(payload: dict) -> bool:
    """Validate a payload against the completion request schema.

    Raises:
        SerializationError: on invalid payloads, chained to the jsonschema error.

    Returns:
        True when valid.
    """
    try:
        validate(instance=payload, schema=COMPLETION_REQUEST_SCHEMA)
    except ValidationError as exc:
        raise SerializationError(f"Invalid completion request: {exc.message}") from exc

    return True
