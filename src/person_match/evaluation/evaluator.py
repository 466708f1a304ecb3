"""
Accuracy evaluation of the name matcher against labelled pairs.

Samples are independent, so a run can be split into shards, each shard
filling its own ConfusionMatrix, and the partial matrices added together
before precision / recall / F1 are read off the merged totals.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

from person_match.evaluation.confusion import ConfusionMatrix
from person_match.evaluation.models import EvaluationReport, EvaluationSample, Mismatch
from person_match.logging import get_logger
from person_match.matching.full_compare import full_compare

log = get_logger("evaluator")

NameComparison = Callable[[str, str], bool]
MismatchHandler = Callable[[Mismatch], None]


def _evaluate_shard(
    samples: Sequence[EvaluationSample],
    compare: NameComparison,
) -> Tuple[ConfusionMatrix, List[Mismatch]]:
    matrix = ConfusionMatrix()
    mismatches: List[Mismatch] = []

    for sample in samples:
        predicted = bool(compare(sample.name1, sample.name2))
        matrix.record(predicted, sample.expected)
        if predicted != sample.expected:
            mismatches.append(Mismatch(sample=sample, predicted=predicted))

    return matrix, mismatches


def _shards(samples: Sequence[EvaluationSample], count: int) -> List[Sequence[EvaluationSample]]:
    """Split into ``count`` contiguous, order-preserving chunks."""
    size, extra = divmod(len(samples), count)
    chunks = []
    start = 0
    for index in range(count):
        end = start + size + (1 if index < extra else 0)
        chunks.append(samples[start:end])
        start = end
    return [chunk for chunk in chunks if chunk]


def evaluate(
    samples: Sequence[EvaluationSample],
    compare: NameComparison = full_compare,
    workers: int = 1,
    on_mismatch: Optional[MismatchHandler] = None,
    log_mismatches: bool = True,
) -> EvaluationReport:
    """
    Run ``compare`` over every sample and score it against the labels.

    Every misclassified pair is logged (unless ``log_mismatches`` is off),
    handed to ``on_mismatch`` and kept on the report, in input order.
    ``workers > 1`` evaluates contiguous shards on a thread pool; the totals
    are identical to a sequential run.
    """
    samples = list(samples)
    workers = max(1, int(workers))

    if workers == 1 or len(samples) < 2:
        matrix, mismatches = _evaluate_shard(samples, compare)
    else:
        shards = _shards(samples, min(workers, len(samples)))
        log.debug("Evaluating %d samples in %d shards", len(samples), len(shards))
        with ThreadPoolExecutor(max_workers=len(shards)) as pool:
            results = list(pool.map(lambda shard: _evaluate_shard(shard, compare), shards))

        matrix = ConfusionMatrix()
        mismatches = []
        for shard_matrix, shard_mismatches in results:
            matrix = matrix + shard_matrix
            mismatches.extend(shard_mismatches)

    for mismatch in mismatches:
        if log_mismatches:
            log.warning(
                "Mismatch (expected %s, predicted %s): %s | %s",
                mismatch.sample.expected,
                mismatch.predicted,
                mismatch.sample.name1,
                mismatch.sample.name2,
            )
        if on_mismatch is not None:
            on_mismatch(mismatch)

    report = EvaluationReport(matrix=matrix, mismatches=mismatches)
    log.info(
        "Evaluated %d samples: precision=%s recall=%s f1=%s",
        matrix.total,
        report.precision,
        report.recall,
        report.f1,
    )
    return report
