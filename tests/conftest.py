"""Shared fixtures: a small config rooted in ``tmp_path`` and fake tools."""

from __future__ import annotations

import pytest

from tests.fake_tools import COPY_TREE, fake_tool
from transpile_bench.shared.config import BenchmarkConfig


@pytest.fixture
def config(tmp_path) -> BenchmarkConfig:
    return BenchmarkConfig(
        file_count=7,
        working_dir=tmp_path,
        progress_every=2,
        sample_interval_seconds=None,
    )


@pytest.fixture
def baseline_tool(config):
    return fake_tool(
        "Fake Babel",
        script=COPY_TREE,
        corpus_dir=config.corpus_dir,
        output_dir=config.babel_dir,
        config_path=config.resolve("fake-babel.json"),
    )


@pytest.fixture
def candidate_tool(config):
    return fake_tool(
        "Fake SWC",
        script=COPY_TREE,
        corpus_dir=config.corpus_dir,
        output_dir=config.swc_dir,
        config_path=config.resolve(".fake-swcrc"),
    )
