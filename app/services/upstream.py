"""
Thin client for the RouteLLM chat-completions endpoint (OpenAI compatible).
One POST per call; failures propagate to the caller unretried.
"""
import logging
from typing import Any

import httpx

from app.core.config import Settings
from app.core.errors import UpstreamError

log = logging.getLogger(__name__)

Message = dict[str, str]

class RouteLLMClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._api_key = settings.ROUTELLM_API_KEY
        self._url = settings.ROUTELLM_BASE_URL.rstrip("/") + "/chat/completions"
        # None disables httpx's default 5s limit: calls block until the upstream answers
        self._timeout = httpx.Timeout(settings.ROUTELLM_TIMEOUT_SECONDS)
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def complete(
        self,
        model: str,
        messages: list[Message],
        temperature: float = 0.4,
        response_format: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """
        Returns the upstream's parsed JSON response unmodified.
        Raises UpstreamError on any non-2xx status.
        """
        req: dict[str, Any] = {
            "model": model,
            "messages": messages,
            "temperature": temperature,
        }
        if response_format:
            req["response_format"] = response_format
        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

        log.info("RouteLLM request: model=%s, temperature=%s, messages=%d", model, temperature, len(messages))
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            r = await client.post(self._url, json=req, headers=headers)
            if not r.is_success:
                log.error("RouteLLM returned %s: %s", r.status_code, r.text)
                raise UpstreamError(r.status_code, r.text)
            return r.json()

def first_choice_content(completion: Any) -> Any:
    """choices[0].message.content, or None when any step along the way is missing."""
    if not isinstance(completion, dict):
        return None
    choices = completion.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message")
    if not isinstance(message, dict):
        return None
    return message.get("content")
