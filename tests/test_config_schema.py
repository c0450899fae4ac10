import pytest

from config.schema import CompleterConfig, LoggingConfig, OpenAIConfig


def test_defaults_match_fixed_generation_parameters():
    cfg = CompleterConfig()
    assert cfg.openai.model == "text-davinci-003"
    assert cfg.openai.temperature == 0.8
    assert cfg.openai.max_tokens == 2000
    assert cfg.openai.timeout == 30
    assert cfg.openai.api_key_env == "OPENAI_API_KEY"


@pytest.mark.parametrize("kwargs", [
    {"temperature": 2.1},
    {"max_tokens": 0},
    {"timeout": 0},
    {"model": ""},
    {"url": "ftp://example"},
])
def test_openai_config_rejects_invalid_values(kwargs):
    with pytest.raises(ValueError):
        OpenAIConfig(**kwargs)


def test_logging_level_is_normalised():
    assert LoggingConfig(level="debug").level == "DEBUG"


def test_logging_rejects_unknown_format():
    with pytest.raises(ValueError):
        LoggingConfig(format="xml")
