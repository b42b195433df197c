from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field


class Turn(BaseModel):
    role: Optional[str] = Field(default=None, description="'user' or 'assistant'")
    content: Optional[str] = ""


class NormalizedTurn(BaseModel):
    role: Literal["user", "model"]
    content: str


class ModelVariant(str, Enum):
    FAST = "fast"
    CAPABLE = "capable"
    SECONDARY = "secondary"


class ErrorKind(str, Enum):
    CONFIGURATION = "configuration"
    NETWORK = "network"
    MALFORMED_RESPONSE = "malformed_response"
    UNEXPECTED = "unexpected"


class ChatReply(BaseModel):
    content: str
    source_label: Optional[str] = None


class ProviderError(Exception):
    kind: ErrorKind = ErrorKind.UNEXPECTED


class ConfigurationError(ProviderError):
    """The selected provider has no credential configured."""

    kind = ErrorKind.CONFIGURATION


class NetworkError(ProviderError):
    """The outbound call failed or timed out."""

    kind = ErrorKind.NETWORK


class MalformedResponseError(ProviderError):
    """The provider answered with something we could not read."""

    kind = ErrorKind.MALFORMED_RESPONSE


MISSING_KEY_TEXT = "❌ Error: AI Key Missing"


class DispatchResult(BaseModel):
    """Outcome of one dispatch.

    ``reply`` is always renderable, failed calls carry an error text in it so
    the browser UI keeps working. Programmatic callers should look at
    ``error_kind`` instead of parsing the text.
    """

    reply: ChatReply
    error_kind: Optional[ErrorKind] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    @classmethod
    def success(cls, reply: ChatReply) -> "DispatchResult":
        return cls(reply=reply)

    @classmethod
    def failure(cls, exc: ProviderError) -> "DispatchResult":
        if exc.kind is ErrorKind.CONFIGURATION:
            text = MISSING_KEY_TEXT
        else:
            text = f"⚠️ Error: {exc}."
        return cls(reply=ChatReply(content=text), error_kind=exc.kind, error=str(exc))
