"""Plan builder: turns answers into an ordered list of provisioning steps.

``build_plan`` is side-effect free.  It validates the app name, puts the
framework scaffold first, appends the actions of every selected feature in
the order the user picked them, and stable-sorts those by phase so file
patches never run ahead of the install that creates their file.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

from headstart.answers import Answers
from headstart.catalog import Action, ActionCatalog, Phase, TemplateRenderer
from headstart.config import Config
from headstart.errors import CatalogError, ValidationError


@dataclass(frozen=True)
class PlanStep:
    """One resolved action, tagged with the feature it provisions."""

    feature: str
    label: str
    phase: Phase
    action: Action

    @property
    def is_scaffold(self) -> bool:
        return self.phase is Phase.SCAFFOLD


@dataclass(frozen=True)
class Plan:
    """Immutable, ordered provisioning plan for a single project.

    Attributes:
        app_name: Name of the project directory.
        output_dir: Directory the scaffold step runs in.
        steps: The steps in execution order; the first is always the scaffold.
    """

    app_name: str
    output_dir: Path
    steps: tuple[PlanStep, ...]

    @property
    def project_root(self) -> Path:
        """Directory every step after the scaffold runs in."""
        return self.output_dir / self.app_name

    def __iter__(self) -> Iterator[PlanStep]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def __getitem__(self, index: int) -> PlanStep:
        return self.steps[index]


def validate_app_name(app_name: str, output_dir: Path) -> None:
    """Reject names that are empty, not a single path segment, or already taken.

    Raises:
        ValidationError: If the name cannot be used as a new project directory.
    """
    if not app_name or not app_name.strip():
        raise ValidationError("App name must not be empty.")

    separators = {"/", "\\", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in app_name for sep in separators):
        raise ValidationError(f"App name {app_name!r} must not contain path separators.")
    if app_name in (".", ".."):
        raise ValidationError(f"App name {app_name!r} is not a valid directory name.")

    target = output_dir / app_name
    if target.exists():
        raise ValidationError(f"Directory {target} already exists.")


def build_plan(
    answers: Answers,
    catalog: ActionCatalog,
    config: Optional[Config] = None,
    renderer: Optional[TemplateRenderer] = None,
) -> Plan:
    """Build the provisioning plan for *answers* from *catalog*.

    Args:
        answers: The validated user answers.
        catalog: Catalog for ``answers.project_kind``.
        config: Supplies the output directory and executable names.
            Defaults to ``Config()``.
        renderer: Template renderer for commands and file bodies.

    Returns:
        The ordered ``Plan``.

    Raises:
        ValidationError: The app name is unusable or its directory exists.
        CatalogError: The catalog is for another project kind, lacks the
            chosen framework, or lacks a feature the user selected.
    """
    config = config or Config()
    renderer = renderer or TemplateRenderer()
    output_dir = Path(config.output_dir)

    validate_app_name(answers.app_name, output_dir)

    if catalog.kind is not answers.project_kind:
        raise CatalogError(
            f"{catalog.kind.value} catalog cannot provision a {answers.project_kind.value} project"
        )

    context = _build_context(answers, catalog, config)

    scaffold_spec = catalog.scaffold_for(answers.framework)
    scaffold = PlanStep(
        feature=answers.framework.value,
        label=scaffold_spec.label,
        phase=Phase.SCAFFOLD,
        action=scaffold_spec.resolve(renderer, context),
    )

    # A picked name without an entry is a catalog bug, never a skip.
    selection = answers.selected_features()
    for name in selection:
        catalog.get(name)

    rank = {name: index for index, name in enumerate(selection)}
    selected = [feature for feature in catalog if feature.is_selected(answers)]
    # sorted() is stable: implied features keep catalog order behind user picks.
    selected = sorted(selected, key=lambda feature: rank.get(feature.name, len(rank)))

    steps: list[PlanStep] = []
    for feature in selected:
        for spec in feature.actions:
            steps.append(
                PlanStep(
                    feature=feature.name,
                    label=spec.label,
                    phase=spec.phase,
                    action=spec.resolve(renderer, context),
                )
            )
    steps.sort(key=lambda step: step.phase)

    return Plan(
        app_name=answers.app_name,
        output_dir=output_dir,
        steps=(scaffold, *steps),
    )


def _build_context(
    answers: Answers, catalog: ActionCatalog, config: Config
) -> dict[str, Any]:
    context: dict[str, Any] = {
        "app_name": answers.app_name,
        "framework": answers.framework.value,
        **config.template_context(),
    }
    context.update(catalog.context_for(answers))
    return context
