"""transpile-bench package initialisation."""

__all__ = [
    "benchmarks",
    "core",
    "corpus",
    "reporting",
    "shared",
]
