"""Invocation specs for the default tool pair: Babel and SWC."""

from __future__ import annotations

import json
import os
from pathlib import Path

from transpile_bench.core.models import ToolInvocationSpec
from transpile_bench.shared.config import BenchmarkConfig

BABEL_CONFIG_FILE = "babel.config.json"
SWC_CONFIG_FILE = ".swcrc"

INSTALL_HINT = (
    "npm install --save-dev @babel/cli @babel/core @babel/preset-env "
    "@babel/preset-react @babel/preset-typescript "
    "@babel/plugin-transform-class-properties @babel/plugin-transform-runtime "
    "@swc/cli @swc/core"
)

BABEL_CONFIG: dict = {
    "presets": [
        "@babel/preset-env",
        "@babel/preset-react",
        "@babel/preset-typescript",
    ],
    "plugins": [
        "@babel/plugin-transform-class-properties",
        "@babel/plugin-transform-runtime",
    ],
}

SWC_CONFIG: dict = {
    "jsc": {
        "parser": {
            "syntax": "typescript",
            "tsx": True,
            "decorators": False,
            "dynamicImport": False,
        },
        "transform": {
            "react": {
                "pragma": "React.createElement",
                "pragmaFrag": "React.Fragment",
                "throwIfNamespace": True,
                "development": False,
                "useBuiltins": False,
            }
        },
        "target": "es2018",
    },
    "module": {"type": "commonjs"},
    "sourceMaps": True,
}


def _npx() -> str:
    return "npx.cmd" if os.name == "nt" else "npx"


def _render_config(payload: dict) -> str:
    return json.dumps(payload, indent=2) + "\n"


def babel_invocation(config: BenchmarkConfig) -> ToolInvocationSpec:
    return ToolInvocationSpec(
        name="Babel (JavaScript)",
        command=(
            _npx(),
            "babel",
            str(config.corpus_dir),
            "--out-dir",
            str(config.babel_dir),
            "--extensions",
            ".tsx,.ts",
            "--source-maps",
        ),
        config_path=config.resolve(BABEL_CONFIG_FILE),
        config_contents=_render_config(BABEL_CONFIG),
        output_dir=config.babel_dir,
        version_command=(_npx(), "babel", "--version"),
        install_hint=INSTALL_HINT,
        working_dir=Path(config.working_dir),
    )


def swc_invocation(config: BenchmarkConfig) -> ToolInvocationSpec:
    return ToolInvocationSpec(
        name="SWC (Rust)",
        command=(
            _npx(),
            "swc",
            str(config.corpus_dir),
            "-d",
            str(config.swc_dir),
            "--source-maps",
        ),
        config_path=config.resolve(SWC_CONFIG_FILE),
        config_contents=_render_config(SWC_CONFIG),
        output_dir=config.swc_dir,
        version_command=(_npx(), "swc", "--version"),
        install_hint=INSTALL_HINT,
        working_dir=Path(config.working_dir),
    )
