"""Feature records and the append-only action catalog."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from ..answers import Answers, Framework, ProjectKind
from ..errors import CatalogError
from .actions import ActionSpec, CommandSpec, Phase


@dataclass(frozen=True)
class Feature:
    """A named capability and the actions that provision it.

    By default a feature is selected when the user picked its name (see
    ``Answers.selected_features``).  Features implied by another answer, such
    as the installs of a server framework, pass an explicit ``predicate``.
    """

    name: str
    actions: tuple[ActionSpec, ...]
    predicate: Optional[Callable[[Answers], bool]] = None

    def is_selected(self, answers: Answers) -> bool:
        if self.predicate is not None:
            return self.predicate(answers)
        return answers.is_selected(self.name)


class ActionCatalog:
    """Registry of scaffold commands and features for one project kind.

    The catalog is built once at startup and only ever grows.  Registering
    a duplicate name, a scaffold for a framework of another kind, or a
    feature action in the scaffold phase raises ``CatalogError``.

    Args:
        kind: The project kind this catalog provisions.
        context: Optional hook returning extra template variables for a set
            of answers (stylesheet path, selected plugins, ...).
    """

    def __init__(
        self,
        kind: ProjectKind,
        context: Optional[Callable[[Answers], dict[str, Any]]] = None,
    ) -> None:
        self.kind = kind
        self._context = context
        self._scaffolds: dict[Framework, CommandSpec] = {}
        self._features: dict[str, Feature] = {}

    # -- Registration ------------------------------------------------------

    def register_scaffold(self, framework: Framework, spec: CommandSpec) -> CommandSpec:
        if framework.kind is not self.kind:
            raise CatalogError(
                f"{framework.value} is not a {self.kind.value} framework"
            )
        if framework in self._scaffolds:
            raise CatalogError(f"scaffold for {framework.value} is already registered")
        if spec.phase is not Phase.SCAFFOLD:
            raise CatalogError(f"scaffold for {framework.value} must be in the scaffold phase")
        self._scaffolds[framework] = spec
        return spec

    def register(self, feature: Feature) -> Feature:
        if feature.name in self._features:
            raise CatalogError(f"feature {feature.name!r} is already registered")
        if not feature.actions:
            raise CatalogError(f"feature {feature.name!r} has no actions")
        for action in feature.actions:
            if action.phase is Phase.SCAFFOLD:
                raise CatalogError(
                    f"feature {feature.name!r}: only the framework scaffold runs in phase 0"
                )
        self._features[feature.name] = feature
        return feature

    # -- Lookup ------------------------------------------------------------

    def scaffold_for(self, framework: Framework) -> CommandSpec:
        try:
            return self._scaffolds[framework]
        except KeyError:
            raise CatalogError(f"no scaffold registered for {framework.value}") from None

    def context_for(self, answers: Answers) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context(answers)

    def get(self, name: str) -> Feature:
        try:
            return self._features[name]
        except KeyError:
            raise CatalogError(f"no catalog entry for feature {name!r}") from None

    def __contains__(self, name: object) -> bool:
        return name in self._features

    def __iter__(self) -> Iterator[Feature]:
        return iter(self._features.values())

    def __len__(self) -> int:
        return len(self._features)
