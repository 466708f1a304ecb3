from __future__ import annotations

from dataclasses import replace
from functools import partial

from person_match.core.context import EvaluationContext
from person_match.core.exceptions import EvaluationError
from person_match.evaluation import EvaluationReport, evaluate, load_samples
from person_match.matching import MatchSettings, full_compare


class Pipeline:
    """
    Loads the labelled dataset and evaluates the matcher against it.
    No matching logic lives here.
    """

    def __init__(self, context: EvaluationContext):
        self.ctx = context
        self.log = context.logger

    def settings(self) -> MatchSettings:
        settings = MatchSettings.from_config(getattr(self.ctx.config, "matching", None))
        if self.ctx.thorough:
            settings = replace(settings, thorough_fallback=True)
        return settings

    def run(self) -> EvaluationReport:
        self.log.info("Pipeline starting")

        try:
            settings = self.settings()
            samples = load_samples(self.ctx.dataset_path)

            report = evaluate(
                samples,
                compare=partial(full_compare, settings=settings),
                workers=self.ctx.workers,
                log_mismatches=self.ctx.report_mismatches,
            )

            self.ctx.stats.update(
                samples=len(samples),
                mismatches=len(report.mismatches),
                precision=report.precision,
                recall=report.recall,
                f1=report.f1,
            )
            self.log.info("Pipeline completed successfully")

            return report

        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise EvaluationError(str(exc)) from exc
