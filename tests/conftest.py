"""Shared test fixtures for SVGO Export."""
from __future__ import annotations

from typing import Dict, List

import pytest

from svgoexport import optimizer as optimizer_module
from svgoexport import sound as sound_module
from svgoexport.optimizer import CommandResult


class FakeOptimizer:
    """Records the folders it is asked to optimize."""

    def __init__(self, results: Dict[str, bool] | None = None, default: bool = True):
        self.results = results or {}
        self.default = default
        self.calls: List[str] = []

    def __call__(self, folder: str) -> bool:
        self.calls.append(folder)
        return self.results.get(folder, self.default)


class FakeSound:
    """Records every cue instead of playing it."""

    def __init__(self):
        self.cues: List[bool] = []

    def __call__(self, success: bool) -> None:
        self.cues.append(success)


class FakeRunner:
    """Stands in for subprocess.run, returning a fixed exit code."""

    def __init__(self, returncode: int = 0, stderr: str = ""):
        self.returncode = returncode
        self.stderr = stderr
        self.commands: List[List[str]] = []

    def __call__(self, args) -> CommandResult:
        self.commands.append(list(args))
        return CommandResult(returncode=self.returncode, stderr=self.stderr)


def svg_export(path: str) -> dict:
    return {"path": path, "request": {"format": "svg"}}


def png_export(path: str) -> dict:
    return {"path": path, "request": {"format": "png"}}


@pytest.fixture(autouse=True)
def no_real_processes(monkeypatch):
    """Keep tests from launching svgo or playing sounds."""
    runner = FakeRunner()
    launched: List[List[str]] = []
    monkeypatch.setattr(optimizer_module, "run_subprocess", runner)
    monkeypatch.setattr(sound_module, "launch_detached", launched.append)
    return runner, launched


@pytest.fixture
def fake_runner(no_real_processes) -> FakeRunner:
    return no_real_processes[0]


@pytest.fixture
def launched_sounds(no_real_processes) -> List[List[str]]:
    return no_real_processes[1]


@pytest.fixture
def fake_optimizer() -> FakeOptimizer:
    return FakeOptimizer()


@pytest.fixture
def fake_sound() -> FakeSound:
    return FakeSound()
