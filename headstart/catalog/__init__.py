"""headstart action catalogs -- what each feature does to a new project.

Quick usage::

    from headstart.catalog import catalog_for

    catalog = catalog_for(answers.project_kind)
    scaffold = catalog.scaffold_for(answers.framework)
"""

from headstart.answers import ProjectKind
from headstart.catalog.actions import (
    Action,
    ActionSpec,
    Command,
    CommandSpec,
    FileMutation,
    FileMutationSpec,
    MutationMode,
    Phase,
    prepend_block,
)
from headstart.catalog.base import ActionCatalog, Feature
from headstart.catalog.client import build_client_catalog
from headstart.catalog.server import build_server_catalog
from headstart.catalog.templates import TemplateRenderer


def catalog_for(kind: ProjectKind) -> ActionCatalog:
    """Return a freshly built catalog for *kind*."""
    if kind is ProjectKind.SERVER:
        return build_server_catalog()
    return build_client_catalog()


__all__ = [
    "Action",
    "ActionCatalog",
    "ActionSpec",
    "Command",
    "CommandSpec",
    "Feature",
    "FileMutation",
    "FileMutationSpec",
    "MutationMode",
    "Phase",
    "TemplateRenderer",
    "build_client_catalog",
    "build_server_catalog",
    "catalog_for",
    "prepend_block",
]
