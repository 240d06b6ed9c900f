"""Action catalog for Server (backend) projects.

Server plans only ever hold the scaffold and the installs implied by the
chosen framework.
"""

from __future__ import annotations

import os
from typing import Any

from ..answers import Answers, Framework, ProjectKind
from .actions import CommandSpec, Phase
from .base import ActionCatalog, Feature

SCAFFOLD_LABEL = "Setting up the project template"

_VENV_SCAFFOLD = "{{ python }} -m venv {{ app_name | shquote }}/.venv"

_SCAFFOLDS: dict[Framework, str] = {
    Framework.EXPRESS: "{{ npx }} express-generator {{ app_name | shquote }} --no-view",
    Framework.FASTAPI: _VENV_SCAFFOLD,
    Framework.FLASK: _VENV_SCAFFOLD,
    Framework.DJANGO: _VENV_SCAFFOLD,
}

_FRAMEWORK_ACTIONS: dict[Framework, tuple[CommandSpec, ...]] = {
    Framework.EXPRESS: (
        CommandSpec("Installing dependencies", "{{ npm }} install"),
    ),
    Framework.FASTAPI: (
        CommandSpec(
            "Installing FastAPI",
            "{{ venv_python }} -m pip install fastapi 'uvicorn[standard]'",
        ),
    ),
    Framework.FLASK: (
        CommandSpec("Installing Flask", "{{ venv_python }} -m pip install flask"),
    ),
    Framework.DJANGO: (
        CommandSpec("Installing Django", "{{ venv_python }} -m pip install django"),
        CommandSpec(
            "Creating the Django project",
            "{{ venv_python }} -m django startproject config .",
        ),
    ),
}


def _server_context(answers: Answers) -> dict[str, Any]:
    if os.name == "nt":
        return {"venv_python": r".venv\Scripts\python.exe"}
    return {"venv_python": ".venv/bin/python"}


def _uses(framework: Framework):
    return lambda answers: answers.framework is framework


def build_server_catalog() -> ActionCatalog:
    """Build the catalog for backend projects."""
    catalog = ActionCatalog(ProjectKind.SERVER, context=_server_context)

    for framework, template in _SCAFFOLDS.items():
        catalog.register_scaffold(
            framework, CommandSpec(SCAFFOLD_LABEL, template, phase=Phase.SCAFFOLD)
        )
    for framework, actions in _FRAMEWORK_ACTIONS.items():
        catalog.register(
            Feature(name=framework.value, actions=actions, predicate=_uses(framework))
        )
    return catalog
