from __future__ import annotations

from typing import Any, List, Mapping, Sequence

from assistant.models import NormalizedTurn


def _read(item: Any, key: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return getattr(item, key, None)


def normalize_history(history: Any) -> List[NormalizedTurn]:
    """Reshape client-supplied turns into what the Gemini chat API accepts.

    Roles other than ``user`` become ``model``, blank turns are dropped and
    the result never opens with a ``model`` turn. Running it again on its own
    output changes nothing.
    """
    if not isinstance(history, Sequence) or isinstance(history, (str, bytes)):
        return []

    turns: List[NormalizedTurn] = []
    for item in history:
        content = _read(item, "content")
        if not isinstance(content, str) or not content.strip():
            continue
        role = "user" if _read(item, "role") == "user" else "model"
        turns.append(NormalizedTurn(role=role, content=content))

    # Gemini rejects conversations whose first turn is not from the user.
    start = 0
    while start < len(turns) and turns[start].role != "user":
        start += 1
    return turns[start:]
