"""Command line entry point: benchmark Babel against SWC on a synthetic corpus."""

from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import structlog

from transpile_bench.core.errors import CorpusGenerationError, PrerequisiteMissingError
from transpile_bench.core.session import BenchmarkSession
from transpile_bench.reporting import DefaultReportExporter, ExportFormat
from transpile_bench.shared import BenchmarkConfig, configure_logging, write_error_report

EXIT_OK = 0
EXIT_PREREQUISITES = 1
EXIT_FAILED = 2
EXIT_PARTIAL = 3


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="transpile-bench",
        description="Compare Babel and SWC on a synthetic TypeScript/TSX corpus.",
    )
    parser.add_argument(
        "--file-count",
        type=int,
        help="Number of synthetic files to generate (default: 10000)",
    )
    parser.add_argument(
        "--workdir",
        type=Path,
        help="Directory for the corpus, tool outputs and tool configs (default: current directory)",
    )
    parser.add_argument(
        "--runs-per-day",
        type=int,
        help="Builds per day assumed by the savings projection (default: 10)",
    )
    parser.add_argument(
        "--sample-interval",
        type=float,
        help="Seconds between memory samples while a tool runs (default: 5)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        help="Kill a tool after this many seconds (default: wait indefinitely)",
    )
    parser.add_argument(
        "--report",
        type=Path,
        help="Also write the session report to this file",
    )
    parser.add_argument(
        "--format",
        choices=[fmt.value for fmt in ExportFormat],
        default=ExportFormat.JSON.value,
        help="Format of --report (default: json)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show debug logs",
    )
    return parser


def _build_config(args: Namespace) -> BenchmarkConfig:
    return BenchmarkConfig.default().with_overrides(
        file_count=args.file_count,
        working_dir=args.workdir.resolve() if args.workdir is not None else None,
        runs_per_day=args.runs_per_day,
        sample_interval_seconds=args.sample_interval,
        tool_timeout_seconds=args.timeout,
    )


def _run_benchmark(args: Namespace) -> int:
    logger = structlog.get_logger(__name__)

    try:
        config = _build_config(args)
    except ValueError as exc:
        logger.error("invalid-configuration", error=str(exc))
        return EXIT_FAILED

    session = BenchmarkSession(config)
    try:
        report = session.run()
    except PrerequisiteMissingError as exc:
        logger.error("prerequisites-missing", tools=list(exc.tools))
        print(f"Missing tools: {', '.join(exc.tools)}", file=sys.stderr)
        if exc.install_hints:
            print("Install them with:", file=sys.stderr)
            for hint in exc.install_hints:
                print(f"  {hint}", file=sys.stderr)
        return EXIT_PREREQUISITES
    except CorpusGenerationError as exc:
        logger.error("corpus-generation-failed", error=str(exc))
        return EXIT_FAILED
    except Exception as exc:  # pragma: no cover - environment errors
        logger.exception("benchmark-failed", error=str(exc))
        error_report = write_error_report(exc, where="cli", context={"state": session.state.value})
        logger.error("error-report-written", path=str(error_report.path))
        return EXIT_FAILED

    if args.report is not None:
        try:
            path = DefaultReportExporter().export(report, args.report, ExportFormat(args.format))
        except OSError as exc:
            logger.error("report-export-failed", path=str(args.report), error=str(exc))
            return EXIT_FAILED
        logger.info("report-written", path=str(path))

    return EXIT_OK if report.succeeded else EXIT_PARTIAL


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    return _run_benchmark(args)


if __name__ == "__main__":
    sys.exit(main())
