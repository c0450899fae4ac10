import pytest
from pydantic import ValidationError

from providers.schema import CompletionRequest, CompletionResponse


def test_response_ignores_unknown_fields():
    resp = CompletionResponse.model_validate({
        "id": "cmpl-1",
        "object": "text_completion",
        "created": 1700000000,
        "model": "text-davinci-003",
        "choices": [{"text": "hi", "index": 0, "finish_reason": "stop", "logprobs": None}],
        "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
        "system_fingerprint": "fp",
    })
    assert resp.id == "cmpl-1"
    assert resp.choices[0].text == "hi"
    assert resp.choices[0].finish_reason == "stop"


def test_response_without_choices_is_empty():
    assert not CompletionResponse.model_validate({"id": "x"}).choices
    assert not CompletionResponse.model_validate({"choices": None}).choices


def test_choice_text_defaults_to_empty():
    resp = CompletionResponse.model_validate({"choices": [{"index": 0}]})
    assert resp.choices[0].text == ""


def test_choices_must_be_a_list():
    with pytest.raises(ValidationError):
        CompletionResponse.model_validate({"choices": "hello"})


def test_request_rejects_nan_temperature():
    with pytest.raises(ValidationError):
        CompletionRequest(prompt="p", model="m", temperature=float('nan'), max_tokens=1)


def test_request_dump_has_wire_field_names():
    req = CompletionRequest(prompt="p", model="m", temperature=0.8, max_tokens=2000)
    assert req.model_dump() == {"prompt": "p", "model": "m", "temperature": 0.8, "max_tokens": 2000}
