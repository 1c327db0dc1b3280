from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from timesheet_py.commands import Session
from timesheet_py.config import load_config


class Clock:
    def __init__(self, start: datetime):
        self.t = start

    def __call__(self) -> datetime:
        return self.t

    def advance(self, **kw) -> str:
        """Move the clock forward; returns "" so it can stand in for pressing Enter."""
        self.t += timedelta(**kw)
        return ""


class Console:
    """Scripted answers for read_line; callables are invoked instead of returned."""

    def __init__(self):
        self.answers: list = []
        self.prompts: list[str] = []
        self.lines: list[str] = []

    def feed(self, *answers) -> None:
        self.answers.extend(answers)

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        answer = self.answers.pop(0)
        return answer() if callable(answer) else answer

    def write(self, text: str) -> None:
        self.lines.append(text)

    @property
    def output(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def clock() -> Clock:
    return Clock(datetime(2026, 1, 20, 10, 0, 0))


@pytest.fixture
def console() -> Console:
    return Console()


@pytest.fixture
def cfg(tmp_path: Path):
    return load_config(tmp_path / "no-config").with_store(tmp_path / "Timesheet.xlsx")


@pytest.fixture
def session(cfg, clock, console) -> Session:
    return Session.from_config(
        cfg,
        read_line=console.read_line,
        write=console.write,
        now=clock,
        pause=lambda s: None,
        clear=lambda: None,
    )
