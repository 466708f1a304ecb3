from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class EvaluationContext:
    """
    Shared context for one evaluation run.
    Passed from the entry points into the pipeline.
    """

    config: Any
    logger: Any

    dataset_path: Optional[str] = None

    workers: int = 1
    thorough: bool = False
    report_mismatches: bool = True

    stats: Dict[str, Any] = field(default_factory=dict)

    debug: bool = False
