"""Shared pytest fixtures for the headstart test suite.

Provides reusable fixtures for:
- Sample answers (the Vite + Tailwind + Daisy UI scenario, a server project)
- A ``Config`` pointing at a temporary output directory
- A recording progress sink
- A fake command runner that mimics scaffold generators and installers
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Optional

import pytest

from headstart.answers import (
    Answers,
    CSSFramework,
    Deployment,
    FetchLibrary,
    Framework,
    ProjectKind,
    StateManagement,
    UILibrary,
)
from headstart.config import Config


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def vite_tailwind_answers() -> Answers:
    """React/Vite JS with Tailwind, Daisy UI, Zustand and the Fetch API."""
    return Answers(
        app_name="demo",
        project_kind=ProjectKind.CLIENT,
        framework=Framework.REACT_VITE_JS,
        css_framework=CSSFramework.TAILWIND,
        ui_library=UILibrary.DAISY_UI,
        state_management=StateManagement.ZUSTAND,
        fetch_library=FetchLibrary.FETCH_API,
        install_router=False,
        deployment=Deployment.NONE,
    )


@pytest.fixture
def fastapi_answers() -> Answers:
    return Answers(
        app_name="api",
        project_kind=ProjectKind.SERVER,
        framework=Framework.FASTAPI,
    )


@pytest.fixture
def minimal_client_answers() -> Answers:
    """A client project without any optional feature."""
    return Answers(
        app_name="bare",
        project_kind=ProjectKind.CLIENT,
        framework=Framework.REACT_CRA,
    )


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Temporary parent directory for generated projects (auto-cleanup)."""
    directory = tmp_path / "workspace"
    directory.mkdir()
    return directory


@pytest.fixture
def config(output_dir: Path) -> Config:
    return Config(output_dir=output_dir)


# ---------------------------------------------------------------------------
# Progress sink
# ---------------------------------------------------------------------------

class RecordingSink:
    """Progress sink that records every event as a tuple."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def on_start(self, feature: str, label: str) -> None:
        self.events.append(("start", feature, label))

    def on_success(self, feature: str, label: str) -> None:
        self.events.append(("success", feature, label))

    def on_failure(self, feature: str, label: str, error: str) -> None:
        self.events.append(("failure", feature, label, error))

    def on_progress(self, completed: int, total: int) -> None:
        self.events.append(("progress", completed, total))

    def started(self) -> list[str]:
        return [e[1] for e in self.events if e[0] == "start"]

    def of(self, kind: str) -> list[tuple[Any, ...]]:
        return [e for e in self.events if e[0] == kind]


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

class FakeRunner:
    """Stand-in for ``run_command``.

    Records ``(command, cwd)`` for every call.  A command containing
    ``create-vite``, ``create-react-app``, ``express-generator`` or
    ``-m venv`` creates the project directory the way the real generators
    do.  ``fail_on`` makes the first command containing that substring exit
    with code 1.
    """

    _SCAFFOLDERS = ("create-vite", "create-react-app", "express-generator", "-m venv")

    def __init__(self, app_name: str, fail_on: Optional[str] = None) -> None:
        self.app_name = app_name
        self.fail_on = fail_on
        self.calls: list[tuple[str, Path]] = []

    async def __call__(
        self, cmd: str, cwd: Any = None, timeout: Optional[float] = None, **kwargs: Any
    ) -> tuple[int, str, str]:
        self.calls.append((cmd, Path(cwd)))
        if self.fail_on and self.fail_on in cmd:
            return (1, "", f"npm ERR! could not install ({self.fail_on})")
        if any(marker in cmd for marker in self._SCAFFOLDERS):
            project = Path(cwd) / self.app_name
            (project / "src").mkdir(parents=True, exist_ok=True)
            (project / "src" / "index.css").write_text(":root { color: black; }\n", encoding="utf-8")
        return (0, "", "")

    @property
    def commands(self) -> list[str]:
        return [cmd for cmd, _ in self.calls]


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    return FakeRunner
