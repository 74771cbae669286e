"""Resolve the API keys the toolkit needs."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from toolsmith.exceptions import ConfigurationError

OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
SERP_API_KEY_ENV = "SERP_API_KEY"


@dataclass(frozen=True)
class Credentials:
    openai_api_key: str
    serp_api_key: str


def resolve_credentials(
    openai_api_key: Optional[str] = None,
    serp_api_key: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> Credentials:
    """Explicit keys win; otherwise read them from ``environ`` (default ``os.environ``).

    Raises:
        ConfigurationError: if either key is missing from both sources.
    """
    env = os.environ if environ is None else environ

    openai_api_key = openai_api_key or env.get(OPENAI_API_KEY_ENV)
    if not openai_api_key:
        raise ConfigurationError("OpenAI API key not defined in params or environment")

    serp_api_key = serp_api_key or env.get(SERP_API_KEY_ENV)
    if not serp_api_key:
        raise ConfigurationError("Serp API key not defined in params or environment")

    return Credentials(openai_api_key=openai_api_key, serp_api_key=serp_api_key)
