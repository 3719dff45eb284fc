"""Deterministic synthetic corpus generation."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import structlog

from transpile_bench.core.errors import CorpusGenerationError
from transpile_bench.core.models import GeneratedCorpus
from transpile_bench.core.progress import NullProgressReporter, ProgressReporter
from transpile_bench.shared.filesystem import reset_directory

from .templates import DEFAULT_TEMPLATES, Template, template_name

logger = structlog.get_logger(__name__)


def file_name(index: int, file_count: int, extension: str = ".tsx") -> str:
    """Name of file ``index``; zero-padded so lexicographic order matches index order."""

    width = len(str(max(int(file_count) - 1, 0)))
    return f"file{int(index):0{width}d}{extension}"


def template_for(index: int, templates: Sequence[Template]) -> Template:
    return templates[int(index) % len(templates)]


def render(index: int, templates: Sequence[Template] = DEFAULT_TEMPLATES) -> str:
    """Renders the text of file ``index``."""

    return template_for(index, templates)(int(index))


def _usage_keys(templates: Sequence[Template]) -> list[str]:
    names = [template_name(t) for t in templates]
    return [name if names.count(name) == 1 else f"{name}#{slot}" for slot, name in enumerate(names)]


def generate_corpus(
    file_count: int,
    output_dir: Path,
    *,
    templates: Sequence[Template] = DEFAULT_TEMPLATES,
    extension: str = ".tsx",
    progress: ProgressReporter | None = None,
    progress_every: int = 1000,
) -> GeneratedCorpus:
    """Recreates ``output_dir`` and writes ``file_count`` rendered templates into it.

    Any I/O failure raises :class:`CorpusGenerationError`; whatever was
    written before the failure must be discarded by the caller.
    """

    file_count = int(file_count)
    if file_count <= 0:
        raise ValueError(f"file_count must be positive, got {file_count}")
    if not templates:
        raise ValueError("at least one template is required")

    reporter = progress or NullProgressReporter()
    output_dir = Path(output_dir)
    logger.info("corpus-generation-started", files=file_count, output_dir=str(output_dir))

    try:
        reset_directory(output_dir)
    except OSError as exc:
        raise CorpusGenerationError(f"cannot prepare corpus directory {output_dir}: {exc}") from exc

    names = _usage_keys(templates)
    files: list[Path] = []
    usage: dict[str, int] = {name: 0 for name in names}

    for index in range(file_count):
        slot = index % len(templates)
        path = output_dir / file_name(index, file_count, extension)
        try:
            path.write_text(templates[slot](index), encoding="utf-8")
        except OSError as exc:
            raise CorpusGenerationError(f"cannot write {path}: {exc}") from exc

        files.append(path)
        usage[names[slot]] += 1

        if (index + 1) % progress_every == 0:
            reporter.update(
                f"{index + 1}/{file_count} files generated",
                percentage=int((index + 1) * 100 / file_count),
            )

    reporter.update(f"{file_count} files generated", percentage=100)
    logger.info("corpus-generation-finished", files=file_count, templates=usage)
    return GeneratedCorpus(output_dir=output_dir, files=tuple(files), template_usage=usage)
