"""Pydantic v2 model of the user's answers.

An ``Answers`` instance is the only input of the plan builder.  It is built
once from the interactive prompts (or a JSON answers file) and is frozen
afterwards.  Choice enums carry the human-readable names shown in the
prompts, which double as feature names in the action catalogs.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class ProjectKind(str, Enum):
    """Which side of the stack the new project covers."""
    CLIENT = "Client"
    SERVER = "Server"


class Framework(str, Enum):
    """Project template the scaffold step instantiates."""
    REACT_CRA = "React (CRA)"
    REACT_VITE_TS = "React with Vite (TypeScript)"
    REACT_VITE_JS = "React with Vite (JavaScript)"
    SVELTE = "Svelte"
    EXPRESS = "Express"
    FASTAPI = "FastAPI"
    FLASK = "Flask"
    DJANGO = "Django"

    @property
    def kind(self) -> ProjectKind:
        if self in _SERVER_FRAMEWORKS:
            return ProjectKind.SERVER
        return ProjectKind.CLIENT

    @property
    def is_react(self) -> bool:
        return self.value.startswith("React")

    @property
    def uses_vite(self) -> bool:
        return self in (Framework.REACT_VITE_TS, Framework.REACT_VITE_JS, Framework.SVELTE)


_SERVER_FRAMEWORKS = frozenset(
    {Framework.EXPRESS, Framework.FASTAPI, Framework.FLASK, Framework.DJANGO}
)


class CSSFramework(str, Enum):
    TAILWIND = "Tailwind CSS"
    BOOTSTRAP = "Bootstrap"
    SASS = "Sass"


class UILibrary(str, Enum):
    MATERIAL_UI = "Material UI"
    CHAKRA_UI = "Chakra UI"
    DAISY_UI = "Daisy UI"
    ANT_DESIGN = "Ant Design"


class StateManagement(str, Enum):
    REDUX = "Redux"
    ZUSTAND = "Zustand"
    MOBX = "MobX"


class FetchLibrary(str, Enum):
    AXIOS = "Axios"
    FETCH_API = "Fetch API"


class Deployment(str, Enum):
    """Hosting platform; only used for the post-run reminder."""
    VERCEL = "Vercel"
    NETLIFY = "Netlify"
    NONE = "None"


ROUTER_FEATURE = "React Router DOM"


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

class Answers(BaseModel):
    """Validated record of every choice the user made.

    Kind-specific fields stay unset unless they apply to the chosen
    framework: a Server answer never carries ``ui_library`` and a Svelte
    answer never carries React-only choices.  Construction fails otherwise.
    """

    model_config = ConfigDict(frozen=True)

    app_name: str = Field(..., description="Directory and package name of the new project")
    project_kind: ProjectKind = Field(..., description="Client or Server project")
    framework: Framework = Field(..., description="Template used by the scaffold step")
    css_framework: Optional[CSSFramework] = Field(default=None)
    ui_library: Optional[UILibrary] = Field(default=None)
    state_management: Optional[StateManagement] = Field(default=None)
    fetch_library: Optional[FetchLibrary] = Field(default=None)
    install_router: bool = Field(default=False, description="Install React Router DOM")
    deployment: Deployment = Field(default=Deployment.NONE)

    @field_validator("app_name")
    @classmethod
    def _app_name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("app name must not be empty")
        return value

    @model_validator(mode="after")
    def _fields_match_framework(self) -> "Answers":
        if self.framework.kind is not self.project_kind:
            raise ValueError(
                f"framework {self.framework.value!r} is not a {self.project_kind.value} framework"
            )

        if self.project_kind is ProjectKind.SERVER:
            client_only = {
                "css_framework": self.css_framework,
                "ui_library": self.ui_library,
                "state_management": self.state_management,
                "fetch_library": self.fetch_library,
            }
            stray = [name for name, value in client_only.items() if value is not None]
            if self.install_router:
                stray.append("install_router")
            if stray:
                raise ValueError(f"server projects do not take {', '.join(stray)}")

        elif not self.framework.is_react:
            react_only = [
                name
                for name, value in (
                    ("ui_library", self.ui_library),
                    ("state_management", self.state_management),
                )
                if value is not None
            ]
            if self.install_router:
                react_only.append("install_router")
            if react_only:
                raise ValueError(
                    f"{', '.join(react_only)} only apply to React frameworks, "
                    f"not {self.framework.value}"
                )
        return self

    # -- Derived views -----------------------------------------------------

    @property
    def use_tailwind(self) -> bool:
        return self.css_framework is CSSFramework.TAILWIND

    def selected_features(self) -> list[str]:
        """Names of the features picked by the user, in the order they were asked.

        The order matters: the plan builder keeps it for steps of the same
        phase.
        """
        names = [
            choice.value
            for choice in (
                self.css_framework,
                self.ui_library,
                self.state_management,
                self.fetch_library,
            )
            if choice is not None
        ]
        if self.install_router:
            names.append(ROUTER_FEATURE)
        return names

    def is_selected(self, feature: str) -> bool:
        return feature in self.selected_features()
