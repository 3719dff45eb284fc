"""Tests for BenchmarkConfig."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from transpile_bench.shared.config import BenchmarkConfig


def test_default_config_values() -> None:
    config = BenchmarkConfig.default()

    assert config.file_count == 10_000
    assert config.output_dir == Path("benchmark_files")
    assert config.babel_output_dir == Path("babel_output")
    assert config.swc_output_dir == Path("swc_output")
    assert config.working_dir == Path.cwd()
    assert config.runs_per_day == 10
    assert config.tool_timeout_seconds is None


def test_config_is_immutable() -> None:
    config = BenchmarkConfig.default()
    with pytest.raises(FrozenInstanceError):
        config.file_count = 5  # type: ignore[misc]


def test_relative_directories_resolve_against_working_dir(tmp_path) -> None:
    config = BenchmarkConfig(working_dir=tmp_path)

    assert config.corpus_dir == tmp_path / "benchmark_files"
    assert config.babel_dir == tmp_path / "babel_output"
    assert config.swc_dir == tmp_path / "swc_output"
    assert config.resolve(tmp_path / "abs") == tmp_path / "abs"


def test_with_overrides_ignores_none_values(tmp_path) -> None:
    config = BenchmarkConfig(working_dir=tmp_path)

    updated = config.with_overrides(file_count=50, runs_per_day=None)

    assert updated.file_count == 50
    assert updated.runs_per_day == config.runs_per_day
    assert config.with_overrides(file_count=None) is config


@pytest.mark.parametrize(
    "kwargs",
    [
        {"file_count": 0},
        {"file_count": -3},
        {"progress_every": 0},
        {"runs_per_day": -1},
        {"sample_interval_seconds": 0},
        {"tool_timeout_seconds": -1.0},
        {"file_extension": "tsx"},
    ],
)
def test_invalid_values_are_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)
