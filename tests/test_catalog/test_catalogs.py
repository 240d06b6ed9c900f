"""Tests for the catalog registry and the stock catalogs.

Covers:
- ActionCatalog registration rules (append-only, unique names, phases)
- Client and Server catalog contents
- catalog_for dispatch
"""

from __future__ import annotations

import pytest

from headstart.answers import (
    Answers,
    CSSFramework,
    FetchLibrary,
    Framework,
    ProjectKind,
    StateManagement,
    UILibrary,
)
from headstart.catalog import (
    ActionCatalog,
    CommandSpec,
    Feature,
    FileMutationSpec,
    Phase,
    build_client_catalog,
    build_server_catalog,
    catalog_for,
)
from headstart.errors import CatalogError

pytestmark = pytest.mark.unit


def _feature(name: str, phase: Phase = Phase.INSTALL) -> Feature:
    return Feature(name, (CommandSpec(f"Installing {name}", f"npm install {name}", phase),))


class TestActionCatalog:
    def test_register_and_lookup(self):
        catalog = ActionCatalog(ProjectKind.CLIENT)
        feature = catalog.register(_feature("Axios"))
        assert catalog.get("Axios") is feature
        assert "Axios" in catalog
        assert len(catalog) == 1
        assert list(catalog) == [feature]

    def test_duplicate_name_rejected(self):
        catalog = ActionCatalog(ProjectKind.CLIENT)
        catalog.register(_feature("Axios"))
        with pytest.raises(CatalogError, match="already registered"):
            catalog.register(_feature("Axios"))

    def test_feature_in_scaffold_phase_rejected(self):
        catalog = ActionCatalog(ProjectKind.CLIENT)
        with pytest.raises(CatalogError, match="phase 0"):
            catalog.register(_feature("Sneaky", Phase.SCAFFOLD))

    def test_feature_without_actions_rejected(self):
        with pytest.raises(CatalogError):
            ActionCatalog(ProjectKind.CLIENT).register(Feature("Empty", ()))

    def test_unknown_feature(self):
        with pytest.raises(CatalogError, match="Redux"):
            ActionCatalog(ProjectKind.CLIENT).get("Redux")

    def test_scaffold_rules(self):
        catalog = ActionCatalog(ProjectKind.CLIENT)
        spec = CommandSpec("scaffold", "npx create-react-app x", Phase.SCAFFOLD)
        catalog.register_scaffold(Framework.REACT_CRA, spec)
        assert catalog.scaffold_for(Framework.REACT_CRA) is spec

        with pytest.raises(CatalogError):
            catalog.register_scaffold(Framework.REACT_CRA, spec)
        with pytest.raises(CatalogError):
            catalog.register_scaffold(Framework.FLASK, spec)
        with pytest.raises(CatalogError):
            catalog.register_scaffold(
                Framework.SVELTE, CommandSpec("scaffold", "x", Phase.INSTALL)
            )
        with pytest.raises(CatalogError):
            catalog.scaffold_for(Framework.SVELTE)

    def test_context_hook(self):
        catalog = ActionCatalog(ProjectKind.CLIENT, context=lambda answers: {"x": answers.app_name})
        answers = Answers(app_name="a", project_kind=ProjectKind.CLIENT, framework=Framework.SVELTE)
        assert catalog.context_for(answers) == {"x": "a"}
        assert ActionCatalog(ProjectKind.CLIENT).context_for(answers) == {}

    def test_default_predicate_uses_selection(self):
        answers = Answers(
            app_name="a",
            project_kind=ProjectKind.CLIENT,
            framework=Framework.REACT_CRA,
            fetch_library=FetchLibrary.AXIOS,
        )
        assert _feature("Axios").is_selected(answers)
        assert not _feature("Redux").is_selected(answers)


class TestClientCatalog:
    def test_every_choice_has_an_entry(self):
        catalog = build_client_catalog()
        choices = [*CSSFramework, *UILibrary, *StateManagement, *FetchLibrary]
        for choice in choices:
            assert choice.value in catalog
        assert "React Router DOM" in catalog

    def test_every_client_framework_has_a_scaffold(self):
        catalog = build_client_catalog()
        for framework in Framework:
            if framework.kind is ProjectKind.CLIENT:
                assert catalog.scaffold_for(framework).phase is Phase.SCAFFOLD

    def test_tailwind_actions(self):
        tailwind = build_client_catalog().get("Tailwind CSS")
        assert [type(a) for a in tailwind.actions] == [
            CommandSpec,
            FileMutationSpec,
            FileMutationSpec,
        ]
        install_phase = tailwind.actions[0].phase
        assert all(a.phase >= install_phase for a in tailwind.actions[1:])

    def test_only_tailwind_mutates_files(self):
        for feature in build_client_catalog():
            if feature.name != "Tailwind CSS":
                assert all(isinstance(a, CommandSpec) for a in feature.actions)

    def test_catalogs_are_independent(self):
        assert build_client_catalog() is not build_client_catalog()


class TestServerCatalog:
    def test_one_feature_per_framework(self):
        catalog = build_server_catalog()
        names = {feature.name for feature in catalog}
        assert names == {"Express", "FastAPI", "Flask", "Django"}

    def test_features_only_install(self):
        for feature in build_server_catalog():
            assert all(a.phase is Phase.INSTALL for a in feature.actions)

    def test_feature_selected_by_framework(self):
        catalog = build_server_catalog()
        answers = Answers(app_name="a", project_kind=ProjectKind.SERVER, framework=Framework.FLASK)
        assert [f.name for f in catalog if f.is_selected(answers)] == ["Flask"]


def test_catalog_for():
    assert catalog_for(ProjectKind.CLIENT).kind is ProjectKind.CLIENT
    assert catalog_for(ProjectKind.SERVER).kind is ProjectKind.SERVER
