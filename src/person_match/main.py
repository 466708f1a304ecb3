"""
Main entry for person_match evaluation runs.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No matching logic lives here.
"""

from __future__ import annotations

import argparse
from typing import List, Optional

from person_match.config import get_config
from person_match.core.context import EvaluationContext
from person_match.core.pipeline import Pipeline
from person_match.logging import get_logger
from person_match.utils import resolve_project_path

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate the person name matcher against labelled pairs"
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Path to the ground-truth CSV (default: paths.dataset from config)",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=int,
        default=None,
        help="Worker threads for evaluation",
    )
    parser.add_argument(
        "--thorough",
        action="store_true",
        help="Enable the token reordering fallback",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(
    input_path: Optional[str],
    workers: Optional[int] = None,
    thorough: bool = False,
    debug_flag: bool = False,
):
    """
    Prepare context and execute the evaluation pipeline.
    """

    cfg = get_config()
    cfg.debug = cfg.debug or bool(debug_flag)

    dataset_path = input_path
    if not dataset_path:
        configured = cfg.paths.get("dataset")
        if not configured:
            raise ValueError("No dataset given and paths.dataset is not configured")
        # Configured paths are relative to the project root, not the cwd.
        dataset_path = str(resolve_project_path(configured))

    log.info(f"Evaluating against: {dataset_path}")

    ctx = EvaluationContext(
        config=cfg,
        logger=log,
        dataset_path=dataset_path,
        workers=workers or int(cfg.evaluation.get("workers", 1) or 1),
        thorough=thorough,
        report_mismatches=bool(cfg.evaluation.get("report_mismatches", True)),
        debug=cfg.debug,
    )

    report = Pipeline(ctx).run()

    log.info(
        f"precision={report.precision} recall={report.recall} f1={report.f1}"
    )
    return report


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> None:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            workers=args.workers,
            thorough=args.thorough,
            debug_flag=args.debug,
        )
    except Exception as exc:
        log.exception(f"Unhandled exception in main: {exc}")
        raise


if __name__ == "__main__":
    main()
