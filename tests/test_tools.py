"""Tests for the default Babel/SWC invocation specs."""

from __future__ import annotations

import json

from transpile_bench.benchmarks.tools import (
    BABEL_CONFIG_FILE,
    SWC_CONFIG_FILE,
    babel_invocation,
    swc_invocation,
)


def test_babel_invocation(config) -> None:
    spec = babel_invocation(config)

    assert spec.command[1:] == (
        "babel",
        str(config.corpus_dir),
        "--out-dir",
        str(config.babel_dir),
        "--extensions",
        ".tsx,.ts",
        "--source-maps",
    )
    assert spec.config_path == config.working_dir / BABEL_CONFIG_FILE
    assert spec.output_dir == config.babel_dir
    assert spec.version_command[1:] == ("babel", "--version")
    assert spec.working_dir == config.working_dir

    payload = json.loads(spec.config_contents)
    assert "@babel/preset-typescript" in payload["presets"]
    assert "@babel/plugin-transform-runtime" in payload["plugins"]


def test_swc_invocation(config) -> None:
    spec = swc_invocation(config)

    assert spec.command[1:] == ("swc", str(config.corpus_dir), "-d", str(config.swc_dir), "--source-maps")
    assert spec.config_path == config.working_dir / SWC_CONFIG_FILE
    assert spec.output_dir == config.swc_dir

    payload = json.loads(spec.config_contents)
    assert payload["jsc"]["parser"] == {
        "syntax": "typescript",
        "tsx": True,
        "decorators": False,
        "dynamicImport": False,
    }
    assert payload["jsc"]["target"] == "es2018"
    assert payload["module"] == {"type": "commonjs"}
    assert payload["sourceMaps"] is True


def test_tools_never_share_outputs_or_configs(config) -> None:
    babel = babel_invocation(config)
    swc = swc_invocation(config)

    assert babel.output_dir != swc.output_dir
    assert babel.config_path != swc.config_path
    assert babel.install_hint == swc.install_hint
