"""Interactive question flow.

Asks the questions in the order the tool has always asked them and returns
a validated ``Answers``.  Answers can also be loaded from a JSON file for
non-interactive runs.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional, TypeVar

from rich.console import Console
from rich.prompt import Confirm, Prompt

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
from headstart.utils import console as default_console

E = TypeVar("E", bound=Enum)


def load_answers(path: str | Path) -> Answers:
    """Load answers from a JSON file (field names as in ``Answers``)."""
    raw = Path(path).read_text(encoding="utf-8")
    return Answers.model_validate_json(raw)


def ask_choice(
    message: str,
    options: list[E],
    console: Optional[Console] = None,
    default: Optional[E] = None,
) -> E:
    """Ask the user to pick one of *options* by number or by name."""
    console = console or default_console
    console.print(f"[bold]{message}[/bold]")
    for index, option in enumerate(options, start=1):
        console.print(f"  [cyan]{index}[/cyan]. {option.value}")

    by_key = {str(index): option for index, option in enumerate(options, start=1)}
    by_key.update({option.value.lower(): option for option in options})
    default_key = str(options.index(default) + 1) if default is not None else "1"

    while True:
        reply = Prompt.ask("Choice", console=console, default=default_key)
        choice = by_key.get(reply.strip().lower())
        if choice is not None:
            return choice
        console.print(f"[red]Please enter a number between 1 and {len(options)}.[/red]")


def ask_answers(console: Optional[Console] = None) -> Answers:
    """Run the full question sequence and return the validated answers."""
    console = console or default_console

    console.print("[green]Welcome to the most modern CLI to headstart your project![/green]")
    app_name = Prompt.ask(
        "What is the name of your application?", console=console, default="my-app"
    )
    kind = ask_choice("What are you building?", list(ProjectKind), console)
    frameworks = [f for f in Framework if f.kind is kind]
    framework = ask_choice("Choose your framework:", frameworks, console)

    if kind is ProjectKind.SERVER:
        return Answers(app_name=app_name, project_kind=kind, framework=framework)

    css_framework = ask_choice(
        "Choose your CSS framework or preprocessor:", list(CSSFramework), console
    )

    ui_library = None
    state_management = None
    install_router = False
    if framework.is_react:
        ui_library = ask_choice("Choose a UI library to install:", list(UILibrary), console)
        install_router = Confirm.ask(
            "Would you like to install React Router DOM?", console=console, default=False
        )

    fetch_library = ask_choice("Choose your fetching library:", list(FetchLibrary), console)
    if framework.is_react:
        state_management = ask_choice(
            "Choose your state management tool:", list(StateManagement), console
        )

    deployment = ask_choice(
        "Choose your deployment platform:", list(Deployment), console, default=Deployment.NONE
    )

    return Answers(
        app_name=app_name,
        project_kind=kind,
        framework=framework,
        css_framework=css_framework,
        ui_library=ui_library,
        state_management=state_management,
        fetch_library=fetch_library,
        install_router=install_router,
        deployment=deployment,
    )
