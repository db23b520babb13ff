"""Mock executor adapter for local development."""

from __future__ import annotations

from .base import (
    AnalysisExecutionProgress,
    AnalysisExecutionStatus,
    ExecutionContext,
    ExecutionSummary,
)


class MockExecutorAdapter:
    """Labels every document neutral without talking to a remote provider."""

    provider = "Mock"

    def execute(self, context: ExecutionContext) -> ExecutionSummary:
        total = len(context.results)
        if total == 0:
            context.on_progress(self.provider, AnalysisExecutionProgress(AnalysisExecutionStatus.CANCELED, 0, 0, 0))
            return ExecutionSummary(provider=self.provider, total=0, processed=0, failed=0, canceled=True)

        processed = 0
        canceled = False
        for document in context.results.values():
            document.add_output(self.provider, 0, "neutral")
            processed += 1
            event = AnalysisExecutionProgress(AnalysisExecutionStatus.PROCESSED, total, processed, 0)
            if not context.on_progress(self.provider, event):
                canceled = True
                break

        context.on_progress(self.provider, AnalysisExecutionProgress(AnalysisExecutionStatus.SUCCESS, total, processed, 0))
        return ExecutionSummary(provider=self.provider, total=total, processed=processed, failed=0, canceled=canceled)
