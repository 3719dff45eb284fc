"""Synthetic corpus generation.

This package provides:
- pure source templates parameterised by file index,
- a generator writing a deterministic corpus to a clean directory.
"""

from .generator import file_name, generate_corpus, render
from .templates import DEFAULT_TEMPLATES, Template

__all__ = ["DEFAULT_TEMPLATES", "Template", "file_name", "generate_corpus", "render"]
