"""headstart configuration.

Typed configuration for the tool: where projects are created and which
executables the catalog commands invoke.  Uses a Pydantic v2 model so values
are validated at construction time and can be saved to / loaded from JSON or
read from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global headstart configuration.

    Instances are created once by the CLI and handed to the plan builder
    (for template context) and the executor (for the working directory and
    command timeout).
    """

    output_dir: Path = Field(default=Path("."), description="Parent directory of new projects")
    npm: str = Field(default="npm", description="Package manager used for installs")
    npx: str = Field(default="npx", description="Package runner used for scaffold generators")
    python: str = Field(default="python3", description="Interpreter used to create virtualenvs")
    command_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Per-command timeout in seconds; None waits indefinitely",
    )

    def template_context(self) -> dict[str, Any]:
        """Return the executables as template variables for catalog commands."""
        return {
            "npm": self.npm,
            "npx": self.npx,
            "python": self.python,
        }

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------

    def save(self, path: Path) -> Path:
        """Persist the configuration to a JSON file.

        Returns:
            The path where the file was written.
        """
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(self.model_dump_json(indent=2), encoding="utf-8")
        return target

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load a previously-saved configuration from JSON."""
        raw = Path(path).read_text(encoding="utf-8")
        return cls.model_validate_json(raw)

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            HEADSTART_OUTPUT_DIR, HEADSTART_NPM, HEADSTART_NPX,
            HEADSTART_PYTHON, HEADSTART_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("HEADSTART_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["HEADSTART_OUTPUT_DIR"])
        if os.environ.get("HEADSTART_NPM"):
            kwargs["npm"] = os.environ["HEADSTART_NPM"]
        if os.environ.get("HEADSTART_NPX"):
            kwargs["npx"] = os.environ["HEADSTART_NPX"]
        if os.environ.get("HEADSTART_PYTHON"):
            kwargs["python"] = os.environ["HEADSTART_PYTHON"]
        if os.environ.get("HEADSTART_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = float(os.environ["HEADSTART_COMMAND_TIMEOUT"])

        return cls(**kwargs)
