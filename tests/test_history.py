import pytest

from assistant.history import normalize_history
from assistant.models import NormalizedTurn, Turn


HISTORIES = [
    [],
    [Turn(role="assistant", content="hi"), Turn(role="user", content="hello"), Turn(role="user", content="")],
    [Turn(role="user", content="  spaced  "), Turn(role="assistant", content="ok")],
    [Turn(role="assistant", content="a"), Turn(role="system", content="b")],
    [Turn(role="user", content="   "), Turn(role="bot", content="x"), Turn(role="user", content="y")],
    [{"role": "user", "content": "dict turn"}, {"role": "assistant", "content": None}],
]


def test_leading_assistant_and_blank_turns_dropped():
    history = [
        Turn(role="assistant", content="hi"),
        Turn(role="user", content="hello"),
        Turn(role="user", content=""),
    ]
    assert normalize_history(history) == [NormalizedTurn(role="user", content="hello")]


def test_empty_history():
    assert normalize_history([]) == []


@pytest.mark.parametrize("value", [None, "not a list", 42, {"role": "user"}])
def test_non_sequence_input_yields_empty(value):
    assert normalize_history(value) == []


def test_only_model_turns_yield_empty():
    history = [Turn(role="assistant", content="one"), Turn(role="tool", content="two")]
    assert normalize_history(history) == []


def test_content_is_copied_verbatim():
    history = [Turn(role="user", content="  keep  inner   spacing \n")]
    assert normalize_history(history)[0].content == "  keep  inner   spacing \n"


def test_unknown_roles_become_model():
    history = [
        Turn(role="user", content="q"),
        Turn(role="assistant", content="a"),
        Turn(role="system", content="s"),
    ]
    assert [t.role for t in normalize_history(history)] == ["user", "model", "model"]


@pytest.mark.parametrize("history", HISTORIES)
def test_normalize_properties(history):
    result = normalize_history(history)
    assert normalize_history(result) == result
    assert not result or result[0].role == "user"
    assert all(turn.content.strip() for turn in result)
    assert all(turn.role in {"user", "model"} for turn in result)


def test_missing_role_is_treated_as_model():
    history = [Turn(content="orphan"), Turn(role="user", content="q"), Turn(content="a")]
    assert normalize_history(history) == [
        NormalizedTurn(role="user", content="q"),
        NormalizedTurn(role="model", content="a"),
    ]
