"""Exception hierarchy for headstart.

Every error raised by the plan builder, the catalog and the executor derives
from ``HeadstartError`` so the CLI can map them to exit codes in one place.
"""

from __future__ import annotations


class HeadstartError(Exception):
    """Base class for all headstart errors."""


class ValidationError(HeadstartError):
    """Raised when the answers cannot produce a plan (bad app name, existing directory).

    Always raised before any action runs, so nothing on disk has changed.
    """


class CatalogError(HeadstartError):
    """Raised when a catalog is internally inconsistent.

    A selected feature without a catalog entry, a duplicate feature name or a
    feature action declared in the scaffold phase are all programming errors.
    """


class ActionExecutionError(HeadstartError):
    """Raised when a single plan step fails.

    Attributes:
        feature: Name of the feature whose step failed.
        message: The underlying error message.
    """

    def __init__(self, feature: str, message: str) -> None:
        self.feature = feature
        self.message = message
        super().__init__(f"{feature}: {message}")
