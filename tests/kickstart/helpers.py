from __future__ import annotations

from pathlib import Path

from kickstart import exec as exec_util


class FakeRunner:
    """Records commands; ``git clone`` materializes a small template checkout."""

    def __init__(
        self,
        *,
        fail_on: tuple[str, ...] | None = None,
        missing: str | None = None,
    ) -> None:
        self.requests: list[exec_util.CommandRequest] = []
        self._fail_on = fail_on
        self._missing = missing

    @property
    def commands(self) -> list[list[str]]:
        return [list(request.argv) for request in self.requests]

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        argv = request.argv
        if self._missing is not None and argv[0] == self._missing:
            return None
        if self._fail_on is not None and argv[: len(self._fail_on)] == self._fail_on:
            return exec_util.CommandResult(argv=argv, returncode=1, stderr="boom")
        if argv[1:2] == ("clone",):
            target = Path(argv[3])
            (target / ".git" / "objects").mkdir(parents=True)
            (target / ".git" / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
            (target / "package.json").write_text('{"name": "template"}\n', encoding="utf-8")
        return exec_util.CommandResult(argv=argv, returncode=0)
