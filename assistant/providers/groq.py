from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

import httpx

from assistant.core.prompt import SYSTEM_PROMPT
from assistant.models import (
    ChatReply,
    ConfigurationError,
    MalformedResponseError,
    NetworkError,
)
from config.settings import Settings


logger = logging.getLogger("indresh.groq")

FALLBACK_REPLY = "Error from API"
SOURCE_LABEL = "Indresh (Turbo)"


def build_messages(message: str, history: Any) -> List[Dict[str, str]]:
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    for item in history or []:
        if isinstance(item, Mapping):
            role, content = item.get("role"), item.get("content")
        else:
            role, content = getattr(item, "role", None), getattr(item, "content", None)
        messages.append(
            {
                "role": "user" if role == "user" else "assistant",
                "content": content,
            }
        )
    messages.append({"role": "user", "content": message})
    return messages


def _first_choice_content(data: Any) -> Optional[str]:
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    if not isinstance(first, dict):
        return None
    message = first.get("message") or {}
    if not isinstance(message, dict):
        return None
    content = message.get("content")
    return content if isinstance(content, str) and content else None


class GroqProvider:
    def __init__(self, settings: Settings, client: Optional[httpx.Client] = None):
        self.settings = settings
        self.client = client

    def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        headers = {"Authorization": f"Bearer {self.settings.groq_api_key}"}
        if self.client is not None:
            return self.client.post(self.settings.groq_api_url, json=payload, headers=headers)
        with httpx.Client(timeout=self.settings.request_timeout) as client:
            return client.post(self.settings.groq_api_url, json=payload, headers=headers)

    def complete(self, message: str, history: Any) -> ChatReply:
        if not self.settings.groq_api_key:
            raise ConfigurationError("GROQ_KEY not set")

        payload = {
            "model": self.settings.groq_model,
            "messages": build_messages(message, history),
            "temperature": self.settings.temperature,
            "max_tokens": self.settings.groq_max_tokens,
        }
        logger.info(
            "Using model %s history_turns=%s",
            self.settings.groq_model,
            len(payload["messages"]) - 2,
        )

        try:
            response = self._post(payload)
        except httpx.HTTPError as exc:
            raise NetworkError(f"Groq API call failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"Groq API returned non-JSON body (status {response.status_code})"
            ) from exc

        content = _first_choice_content(data)
        if content is None:
            # Error bodies and empty choices degrade to a generic reply.
            logger.warning(
                "Groq response had no reply content (status %s)", response.status_code
            )
            content = FALLBACK_REPLY
        return ChatReply(content=content, source_label=SOURCE_LABEL)
