# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import kickstart.io as io
import kickstart.log as log


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    monkeypatch.setenv("KICKSTART_CONFIG", str(tmp_path / "kickstart-config" / "config.json"))
    monkeypatch.delenv("KICKSTART_LOG_LEVEL", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    log.reset()

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)
