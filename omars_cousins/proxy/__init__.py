"""Upstream LLM proxy for the Omar's cousins persona.

Responsibilities:
    - Persona prompt construction from a configurable template
    - One non-streaming chat-completions call per question
    - Answer extraction with a fallback for empty or failed responses

Maintains clean separation from the HTTP layer.
"""

from omars_cousins.proxy.config import ProxyConfig, get_proxy_config
from omars_cousins.proxy.cousins import (
    FALLBACK_ANSWER,
    CousinsService,
    build_prompt,
    extract_answer,
    get_cousins_service,
)

__all__ = [
    "FALLBACK_ANSWER",
    "CousinsService",
    "ProxyConfig",
    "build_prompt",
    "extract_answer",
    "get_cousins_service",
    "get_proxy_config",
]
