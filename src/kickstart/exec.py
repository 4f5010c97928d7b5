"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from . import log


@dataclass(frozen=True)
class CommandRequest:
    """One external command invocation.

    By default the child inherits the terminal so clone progress and installer
    output reach the user directly.
    """

    argv: tuple[str, ...]
    cwd: Path | None = None
    capture_output: bool = False


@dataclass(frozen=True)
class CommandResult:
    argv: tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command runner backed by ``subprocess.run``.

    Returns ``None`` when the executable cannot be found.
    """

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                capture_output=request.capture_output,
                text=True,
                check=False,
            )
        except FileNotFoundError:
            return None
        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=completed.stdout if isinstance(completed.stdout, str) else "",
            stderr=completed.stderr if isinstance(completed.stderr, str) else "",
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


@dataclass(frozen=True)
class CommandExecutionError(RuntimeError):
    """Raised when a command is missing or exits non-zero."""

    request: CommandRequest
    detail: str
    result: CommandResult | None = None

    def __str__(self) -> str:
        return self.detail


def _failure_detail(request: CommandRequest, result: CommandResult) -> str:
    command_text = " ".join(request.argv)
    output = (result.stderr or result.stdout or "").strip()
    if output:
        return f"command failed: {command_text}\n{output}"
    return f"command failed: {command_text}"


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run a command to completion and raise on failure.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory.
        runner: Command runner; the subprocess runner when omitted.

    Returns:
        The ``CommandResult`` of a successful run.

    Raises:
        CommandExecutionError: If the executable is missing or exits non-zero.
    """
    request = CommandRequest(argv=tuple(cmd), cwd=cwd)
    log.command(request.argv, cwd=cwd)
    result = (runner or _DEFAULT_COMMAND_RUNNER).run(request)
    if result is None:
        raise CommandExecutionError(
            request=request,
            detail=f"missing required command: {cmd[0]}" if cmd else "missing required command",
        )
    if result.returncode != 0:
        raise CommandExecutionError(
            request=request,
            result=result,
            detail=_failure_detail(request, result),
        )
    return result
