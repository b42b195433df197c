from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder
from langchain_core.runnables import Runnable
from langchain_google_genai import ChatGoogleGenerativeAI

from assistant.core.prompt import SYSTEM_PROMPT
from assistant.history import normalize_history
from assistant.models import (
    ChatReply,
    ConfigurationError,
    MalformedResponseError,
    ModelVariant,
    NetworkError,
    NormalizedTurn,
)
from config.settings import Settings


logger = logging.getLogger("indresh.gemini")

# Builds the runnable chat model for a model name.
ModelFactory = Callable[[Settings, str], Runnable]


def build_chat_model(settings: Settings, model_name: str) -> Runnable:
    llm = ChatGoogleGenerativeAI(
        model=model_name,
        google_api_key=settings.gemini_api_key,
        temperature=settings.temperature,
        max_output_tokens=settings.gemini_max_output_tokens,
        timeout=settings.request_timeout,
        max_retries=0,
    )
    if settings.gemini_enable_search:
        return llm.bind_tools([{"google_search": {}}])
    return llm


def to_lc_messages(history: List[NormalizedTurn]) -> List[BaseMessage]:
    messages: List[BaseMessage] = []
    for turn in history:
        if turn.role == "user":
            messages.append(HumanMessage(content=turn.content))
        else:
            messages.append(AIMessage(content=turn.content))
    return messages


def extract_text(content: Any) -> str:
    """Pull the reply text out of a chat model message content.

    Grounded answers come back as a list of parts rather than a plain string.
    """
    if isinstance(content, str):
        text = content
    elif isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type", "text") == "text":
                parts.append(part.get("text") or "")
        text = "".join(parts)
    else:
        raise MalformedResponseError(
            f"Unexpected Gemini content type: {type(content).__name__}"
        )
    if not text.strip():
        raise MalformedResponseError("Gemini returned an empty reply")
    return text


class GeminiProvider:
    def __init__(self, settings: Settings, model_factory: Optional[ModelFactory] = None):
        self.settings = settings
        self.model_factory = model_factory or build_chat_model

    def model_name(self, variant: ModelVariant) -> str:
        if variant is ModelVariant.FAST:
            return self.settings.gemini_flash_model
        return self.settings.gemini_pro_model

    def complete(self, message: str, history: Any, variant: ModelVariant) -> ChatReply:
        if not self.settings.gemini_api_key:
            raise ConfigurationError("GEMINI_KEY not set")

        model_name = self.model_name(variant)
        chat_history = to_lc_messages(normalize_history(history))
        logger.info(
            "Using model %s (search=%s) history_turns=%s",
            model_name,
            self.settings.gemini_enable_search,
            len(chat_history),
        )

        prompt = ChatPromptTemplate.from_messages(
            [
                SystemMessage(content=SYSTEM_PROMPT),
                MessagesPlaceholder("chat_history", optional=True),
                ("human", "{input}"),
            ]
        )
        chain = prompt | self.model_factory(self.settings, model_name)

        payload = {"input": message}
        if chat_history:
            payload["chat_history"] = chat_history
        try:
            result = chain.invoke(payload)
        except Exception as exc:
            raise NetworkError(f"Gemini call failed: {exc}") from exc

        content = getattr(result, "content", result)
        return ChatReply(content=extract_text(content), source_label=f"Indresh ({model_name})")
