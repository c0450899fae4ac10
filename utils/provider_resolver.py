"""Resolve provider endpoint URLs from environment, config, or sensible defaults."""
import os
from typing import Optional, Any


DEFAULTS = {
    'openai': 'https://api.openai.com/v1/completions'
}


def resolve_provider_url(provider: str, config: Optional[Any] = None) -> Optional[str]:
    """Return the resolved URL for provider.

    Precedence: ENV > config.<provider>.url > DEFAULT
    """
    env_key = f"{provider.upper()}_URL"
    env_val = os.getenv(env_key)
    if env_val:
        return env_val

    if config is not None:
        prov = getattr(config, provider, None)
        url = getattr(prov, 'url', None) if prov is not None else None
        if url:
            return url

    return DEFAULTS.get(provider)
