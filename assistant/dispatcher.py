from __future__ import annotations

import logging
from typing import Any, Optional

import httpx

from assistant.models import DispatchResult, ModelVariant, ProviderError
from assistant.providers import GeminiProvider, GroqProvider, ModelFactory
from config.settings import Settings


logger = logging.getLogger("indresh.dispatcher")


def parse_model_hint(hint: Optional[str]) -> ModelVariant:
    """Resolve the free-text model hint sent by the browser.

    Case-insensitive substring match, first match wins: ``flash`` picks the
    fast Gemini model, ``pro`` or ``gemini`` the capable one, anything else
    goes to Groq.
    """
    text = (hint or "").lower()
    if "flash" in text:
        return ModelVariant.FAST
    if "pro" in text or "gemini" in text:
        return ModelVariant.CAPABLE
    return ModelVariant.SECONDARY


class ProviderDispatcher:
    def __init__(
        self,
        settings: Settings,
        gemini_model_factory: Optional[ModelFactory] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.settings = settings
        self.gemini = GeminiProvider(settings, model_factory=gemini_model_factory)
        self.groq = GroqProvider(settings, client=http_client)

    def dispatch(self, message: str, history: Any, model_hint: Optional[str]) -> DispatchResult:
        variant = parse_model_hint(model_hint)
        try:
            if variant is ModelVariant.SECONDARY:
                reply = self.groq.complete(message, history)
            else:
                reply = self.gemini.complete(message, history, variant)
        except ProviderError as exc:
            logger.warning("Provider failure (%s): %s", exc.kind.value, exc)
            return DispatchResult.failure(exc)
        except Exception as exc:
            logger.exception("Unexpected dispatch failure: %s", exc)
            return DispatchResult.failure(ProviderError(str(exc)))
        return DispatchResult.success(reply)
