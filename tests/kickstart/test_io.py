from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import patch

import pytest

import kickstart.io as io
from kickstart.project import PROJECT_NAME_ERROR, normalize_project_name, validate_project_name


def _answers(*values: str):
    remaining = iter(values)
    prompts: list[str] = []

    def fake_input(label: str = "") -> str:
        prompts.append(label)
        return next(remaining)

    return fake_input, prompts


def _ask_name(default: str | None = "my-project") -> str:
    return io.prompt_text(
        "Enter your project name",
        default,
        normalize=normalize_project_name,
        validate=validate_project_name,
    )


def test_prompt_text_uses_default_on_enter() -> None:
    fake_input, prompts = _answers("")
    with patch("builtins.input", fake_input):
        assert _ask_name() == "my-project"
    assert prompts == ["Enter your project name [my-project]: "]


def test_prompt_text_normalizes_answer() -> None:
    fake_input, _ = _answers("My Cool App")
    with patch("builtins.input", fake_input):
        assert _ask_name() == "my-cool-app"


def test_prompt_text_reprompts_until_valid(capsys: pytest.CaptureFixture[str]) -> None:
    fake_input, prompts = _answers("bad_name!", "good-name")
    with patch("builtins.input", fake_input):
        assert _ask_name() == "good-name"

    assert len(prompts) == 2
    assert PROJECT_NAME_ERROR in capsys.readouterr().err


def test_prompt_text_empty_answer_without_default_cancels() -> None:
    fake_input, _ = _answers("   ")
    with patch("builtins.input", fake_input), pytest.raises(io.PromptCancelled):
        _ask_name(default=None)


@pytest.mark.parametrize("error", [EOFError, KeyboardInterrupt])
def test_prompt_text_interrupt_cancels(error: type[BaseException]) -> None:
    def interrupted(label: str = "") -> str:
        raise error

    with patch("builtins.input", interrupted), pytest.raises(io.PromptCancelled):
        _ask_name()


def test_select_numbered_fallback(capsys: pytest.CaptureFixture[str]) -> None:
    fake_input, prompts = _answers("3")
    with patch("builtins.input", fake_input):
        value = io.select("Pick", [("pnpm", "pnpm"), ("npm", "npm"), ("yarn", "yarn")])

    assert value == "yarn"
    assert prompts == ["Choice [1]: "]
    out = capsys.readouterr().out
    assert "Pick" in out
    assert "  2) npm" in out


def test_select_enter_keeps_default() -> None:
    fake_input, prompts = _answers("")
    with patch("builtins.input", fake_input):
        value = io.select("Git?", [("Yes", True), ("No", False)], default=False)

    assert value is False
    assert prompts == ["Choice [2]: "]


def test_select_reprompts_on_out_of_range(capsys: pytest.CaptureFixture[str]) -> None:
    fake_input, _ = _answers("0", "x", "2")
    with patch("builtins.input", fake_input):
        assert io.select("Git?", [("Yes", True), ("No", False)]) is False

    assert capsys.readouterr().err.count("enter a number between 1 and 2") == 2


def test_select_requires_choices() -> None:
    with pytest.raises(ValueError):
        io.select("Empty", [])


def test_questionary_text_cancel_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    captured: dict[str, object] = {}

    def fake_text(message: str, **kwargs: object) -> SimpleNamespace:
        captured["message"] = message
        captured.update(kwargs)
        return SimpleNamespace(ask=lambda: None)

    monkeypatch.setattr(io.questionary, "text", fake_text)

    with pytest.raises(io.PromptCancelled):
        _ask_name()

    assert captured["message"] == "Enter your project name"
    assert captured["default"] == "my-project"
    validate = captured["validate"]
    assert callable(validate)
    assert validate("My Project") is True
    assert validate("my_project") == PROJECT_NAME_ERROR
    assert validate("") is True


def test_questionary_select_returns_choice_value(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    captured: dict[str, object] = {}

    def fake_select(message: str, *, choices: list, default: object) -> SimpleNamespace:
        captured["choices"] = choices
        captured["default"] = default
        return SimpleNamespace(ask=lambda: "bun")

    monkeypatch.setattr(io.questionary, "select", fake_select)

    value = io.select("PM", [("pnpm", "pnpm"), ("bun", "bun")], default="bun")

    assert value == "bun"
    choices = captured["choices"]
    assert isinstance(choices, list)
    assert [choice.value for choice in choices] == ["pnpm", "bun"]
    assert captured["default"] is choices[1]


def test_questionary_select_cancel_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: True)
    monkeypatch.setattr(
        io.questionary, "select", lambda *args, **kwargs: SimpleNamespace(ask=lambda: None)
    )

    with pytest.raises(io.PromptCancelled):
        io.select("PM", [("pnpm", "pnpm")])
