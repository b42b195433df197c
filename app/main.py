from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
import logging
from pydantic import BaseModel, Field

from assistant import ProviderDispatcher
from assistant.models import ErrorKind, Turn
from config.settings import get_settings


logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("indresh")

app = FastAPI(title="Indresh 2.0 Chat", version="2.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ChatRequest(BaseModel):
    message: str = Field(..., description="User's latest message")
    conversation_id: Optional[str] = Field(default=None, description="Client conversation id")
    model: Optional[str] = Field(default=None, description="Model hint, e.g. 'gemini-flash'")
    history: Optional[List[Turn]] = Field(
        default_factory=list,
        description="Prior turns, managed by the frontend",
    )


class ChatOutput(BaseModel):
    role: str = "assistant"
    content: str
    via: Optional[str] = None
    error_kind: Optional[ErrorKind] = None


class ChatResponse(BaseModel):
    output: ChatOutput


@lru_cache(maxsize=1)
def get_dispatcher() -> ProviderDispatcher:
    return ProviderDispatcher(get_settings())


@app.post("/api/chat", response_model=ChatResponse, response_model_exclude_none=True)
def chat(req: ChatRequest, dispatcher: ProviderDispatcher = Depends(get_dispatcher)) -> ChatResponse:
    model_hint = req.model or "gemini"
    history = req.history or []
    logger.info(
        "Incoming chat: conversation_id=%s model=%s history_turns=%s message_len=%s",
        req.conversation_id,
        model_hint,
        len(history),
        len(req.message),
    )
    result = dispatcher.dispatch(req.message, history, model_hint)
    if not result.ok:
        logger.warning("Chat degraded to error reply: kind=%s", result.error_kind.value)
    return ChatResponse(
        output=ChatOutput(
            content=result.reply.content,
            via=result.reply.source_label,
            error_kind=result.error_kind,
        )
    )


@app.post("/api/clear/{conversation_id}")
def clear_conversation(conversation_id: str):
    # History lives in the browser; nothing is stored server-side.
    return {"status": "cleared", "conversation_id": conversation_id}


@app.get("/api/history/{conversation_id}")
def conversation_history(conversation_id: str):
    return {"messages": []}


@app.get("/health")
def health():
    return {"status": "ok"}


# Mounted last so the API routes above take precedence.
_public_dir = get_settings().public_dir
if _public_dir.is_dir():
    app.mount("/", StaticFiles(directory=str(_public_dir), html=True), name="public")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=get_settings().port)
