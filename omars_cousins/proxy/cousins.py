"""Omar's cousins proxy service.

Forwards a single question to an OpenAI-compatible chat-completions endpoint
and hands back the persona's answer. The caller never sees an upstream error:
any failure or empty completion degrades to a fixed fallback answer.
"""

import json
import logging
from typing import Any

import httpx
from pydantic import ValidationError

from omars_cousins.proxy.config import ProxyConfig, get_proxy_config

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = "Omar's Cousins are speechless right now!"


def build_prompt(question: str, template: str) -> str:
    """Embed the question into the persona template."""
    return template.replace("{question}", question)


def extract_answer(payload: Any) -> str | None:
    """Pull the first completion's text out of an upstream response body.

    Args:
        payload: Decoded JSON body of a chat-completions response.

    Returns:
        The trimmed completion text, or None if there is no usable text.
    """
    try:
        content = payload["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        return None

    if not isinstance(content, str):
        return None
    return content.strip() or None


class CousinsService:
    """Service for asking Omar's cousins a question.

    Wraps the upstream chat-completions call with:
    - Configuration read at request time when none is injected
    - One outbound request per question, no retries
    - Fallback answer in place of errors
    """

    def __init__(
        self,
        config: ProxyConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the proxy service.

        Args:
            config: Optional proxy configuration.
                    Loaded from environment on every call if not provided.
            transport: Optional httpx transport, used to stub the upstream.
        """
        self._config = config
        self._transport = transport

    def _get_config(self) -> ProxyConfig:
        return self._config or get_proxy_config()

    def _build_payload(self, question: str, config: ProxyConfig) -> dict[str, Any]:
        return {
            "model": config.model_name,
            "messages": [
                {
                    "role": "user",
                    "content": build_prompt(question, config.prompt_template),
                },
            ],
            "max_tokens": config.max_tokens,
        }

    async def ask(self, question: str) -> str:
        """Ask the cousins a question.

        Args:
            question: The user's question.

        Returns:
            The trimmed answer text, or FALLBACK_ANSWER if the upstream
            call fails or returns nothing usable.
        """
        try:
            config = self._get_config()
        except ValidationError as e:
            logger.error(f"Proxy is not configured: {e}")
            return FALLBACK_ANSWER

        try:
            async with httpx.AsyncClient(
                timeout=config.timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    f"{config.base_url}/chat/completions",
                    json=self._build_payload(question, config),
                    headers={"Authorization": f"Bearer {config.api_key}"},
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(f"Upstream returned HTTP {e.response.status_code}")
            return FALLBACK_ANSWER
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning(f"Upstream request failed: {e}")
            return FALLBACK_ANSWER
        except ValueError as e:
            logger.warning(f"Upstream returned an undecodable body: {e}")
            return FALLBACK_ANSWER

        logger.debug(f"Upstream response: {json.dumps(data, indent=2)}")

        answer = extract_answer(data)
        if answer is None:
            logger.warning("Upstream response had no usable answer, using fallback")
            return FALLBACK_ANSWER
        return answer


# Module-level singleton instance
_cousins_service: CousinsService | None = None


def get_cousins_service() -> CousinsService:
    """Get or create the global proxy service.

    Returns:
        The CousinsService instance.
    """
    global _cousins_service
    if _cousins_service is None:
        _cousins_service = CousinsService()
    return _cousins_service
