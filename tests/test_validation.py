import pytest
from jsonschema import ValidationError

from errors import SerializationError
from validation import validate_completion_request


def test_validate_valid_payload():
    payload = {"prompt": "Do work", "model": "text-davinci-003", "temperature": 0.8, "max_tokens": 2000}
    assert validate_completion_request(payload) is True


def test_validate_missing_field():
    payload = {"prompt": "No model", "temperature": 0.8, "max_tokens": 2000}
    with pytest.raises(SerializationError) as excinfo:
        validate_completion_request(payload)
    assert isinstance(excinfo.value.__cause__, ValidationError)


@pytest.mark.parametrize("field,value", [
    ("model", ""),
    ("temperature", 2.5),
    ("max_tokens", 0),
    ("max_tokens", 1.5),
])
def test_validate_out_of_range(field, value):
    payload = {"prompt": "p", "model": "m", "temperature": 0.8, "max_tokens": 10}
    payload[field] = value
    with pytest.raises(SerializationError):
        validate_completion_request(payload)


def test_validate_rejects_extra_fields():
    payload = {"prompt": "p", "model": "m", "temperature": 0.8, "max_tokens": 10, "stream": True}
    with pytest.raises(SerializationError):
        validate_completion_request(payload)
