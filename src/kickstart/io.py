"""Console I/O helpers for user-facing messages and prompts."""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TypeVar

import questionary

T = TypeVar("T")

Validator = Callable[[str], "bool | str"]
Normalizer = Callable[[str], str]


class PromptCancelled(Exception):
    """Raised when the user aborts a question (Ctrl-C, Ctrl-D, empty answer)."""


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str) -> None:
    """Print a normal message to stdout.

    Args:
        message: Text to print.

    Example:
        >>> say("Hello")
        Hello
    """
    print(message)


def warn(message: str) -> None:
    """Print a warning message to stderr."""
    print(f"warning: {message}", file=sys.stderr)


def _read_line(label: str) -> str:
    try:
        return input(label)
    except (EOFError, KeyboardInterrupt) as exc:
        raise PromptCancelled() from exc


def prompt_text(
    text: str,
    default: str | None = None,
    *,
    normalize: Normalizer | None = None,
    validate: Validator | None = None,
) -> str:
    """Ask for a line of text, re-prompting until ``validate`` accepts it.

    ``normalize`` is applied before validation and to the returned value. An
    empty answer (after normalization) cancels the prompt.

    Args:
        text: Prompt label shown to the user.
        default: Value offered when the user just presses enter.
        normalize: Optional transform applied to the raw answer.
        validate: Callable returning ``True`` or an error message.

    Returns:
        The normalized answer.

    Raises:
        PromptCancelled: If the user aborts or submits an empty answer.
    """
    clean = normalize or (lambda value: value.strip())

    def check(raw: str) -> bool | str:
        value = clean(raw)
        if not value or validate is None:
            return True
        return validate(value)

    while True:
        if _use_questionary():
            raw = questionary.text(text, default=default or "", validate=check).ask()
            if raw is None:
                raise PromptCancelled()
        else:
            label = f"{text} [{default}]: " if default else f"{text}: "
            raw = _read_line(label)
            if raw.strip() == "" and default:
                raw = default
        value = clean(str(raw))
        if not value:
            raise PromptCancelled()
        verdict = check(str(raw))
        if verdict is True:
            return value
        warn(str(verdict))


def select(
    text: str,
    choices: Sequence[tuple[str, T]],
    default: T | None = None,
) -> T:
    """Ask the user to pick one of ``choices`` (``(title, value)`` pairs).

    Args:
        text: Prompt label shown to the user.
        choices: Ordered ``(title, value)`` pairs.
        default: Value preselected for the user; the first choice otherwise.

    Returns:
        The value of the selected choice.

    Raises:
        PromptCancelled: If the user aborts the question.
    """
    if not choices:
        raise ValueError("select() needs at least one choice")
    values = [value for _title, value in choices]
    default_index = values.index(default) if default in values else 0

    if _use_questionary():
        options = [questionary.Choice(title, value=value) for title, value in choices]
        answer = questionary.select(text, choices=options, default=options[default_index]).ask()
        if answer is None:
            raise PromptCancelled()
        return answer

    say(text)
    for index, (title, _value) in enumerate(choices, start=1):
        say(f"  {index}) {title}")
    while True:
        raw = _read_line(f"Choice [{default_index + 1}]: ").strip()
        if raw == "":
            return values[default_index]
        if raw.isdigit() and 1 <= int(raw) <= len(choices):
            return values[int(raw) - 1]
        warn(f"enter a number between 1 and {len(choices)}")
