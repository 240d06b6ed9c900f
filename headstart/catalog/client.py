"""Action catalog for Client (frontend) projects."""

from __future__ import annotations

from typing import Any

from ..answers import Answers, Framework, ProjectKind, UILibrary
from .actions import CommandSpec, FileMutationSpec, MutationMode, Phase
from .base import ActionCatalog, Feature

SCAFFOLD_LABEL = "Setting up the project template"

_SCAFFOLDS: dict[Framework, str] = {
    Framework.REACT_CRA: "{{ npx }} create-react-app {{ app_name | shquote }}",
    Framework.REACT_VITE_TS: "{{ npx }} create-vite {{ app_name | shquote }} --template react-ts",
    Framework.REACT_VITE_JS: "{{ npx }} create-vite {{ app_name | shquote }} --template react",
    Framework.SVELTE: "{{ npx }} create-vite {{ app_name | shquote }} --template svelte",
}

# Feature name -> packages passed to ``npm install``, in prompt order.
_NPM_PACKAGES: dict[str, str] = {
    "Bootstrap": "bootstrap",
    "Sass": "sass",
    "Material UI": "@mui/material @emotion/react @emotion/styled",
    "Chakra UI": "@chakra-ui/react @emotion/react @emotion/styled framer-motion",
    "Daisy UI": "daisyui",
    "Ant Design": "antd",
    "Redux": "@reduxjs/toolkit react-redux",
    "Zustand": "zustand",
    "MobX": "mobx mobx-react",
    "Axios": "axios",
    "React Router DOM": "react-router-dom@latest",
}

TAILWIND = Feature(
    name="Tailwind CSS",
    actions=(
        CommandSpec(
            label="Installing Tailwind CSS",
            template=(
                "{{ npm }} install -D tailwindcss@3 postcss autoprefixer"
                " && {{ npx }} tailwindcss init -p"
            ),
        ),
        # Must follow ``tailwindcss init``, which writes its own config.
        FileMutationSpec(
            label="Writing tailwind.config.js",
            path="tailwind.config.js",
            template="tailwind.config.js.j2",
        ),
        FileMutationSpec(
            label="Adding Tailwind directives",
            path="{{ stylesheet }}",
            template="tailwind-directives.css.j2",
            mode=MutationMode.PREPEND,
        ),
    ),
)

FETCH_API = Feature(
    name="Fetch API",
    actions=(
        CommandSpec(
            label="Installing Fetch API",
            template="echo 'Fetch API is built-in, no need to install.'",
        ),
    ),
)


def _client_context(answers: Answers) -> dict[str, Any]:
    """Template variables for the Tailwind config and stylesheet."""
    svelte = answers.framework is Framework.SVELTE
    extensions = "js,jsx,ts,tsx,svelte" if svelte else "js,jsx,ts,tsx"
    content = [f"./src/**/*.{{{extensions}}}"]
    if answers.framework.uses_vite:
        content.insert(0, "./index.html")
    return {
        "esm": answers.framework.uses_vite,
        "daisyui": answers.ui_library is UILibrary.DAISY_UI,
        "content": content,
        "stylesheet": "src/app.css" if svelte else "src/index.css",
    }


def build_client_catalog() -> ActionCatalog:
    """Build the catalog for frontend projects."""
    catalog = ActionCatalog(ProjectKind.CLIENT, context=_client_context)

    for framework, template in _SCAFFOLDS.items():
        catalog.register_scaffold(
            framework, CommandSpec(SCAFFOLD_LABEL, template, phase=Phase.SCAFFOLD)
        )

    catalog.register(TAILWIND)
    for name, packages in _NPM_PACKAGES.items():
        catalog.register(
            Feature(
                name=name,
                actions=(CommandSpec(f"Installing {name}", f"{{{{ npm }}}} install {packages}"),),
            )
        )
    catalog.register(FETCH_API)
    return catalog
