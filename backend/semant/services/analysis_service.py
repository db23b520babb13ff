"""Runs one executor over a batch of documents and records its progress stream."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from semant.core.config import get_settings
from semant.services.executors import (
    AnalysisExecutionProgress,
    ExecutionContext,
    ExecutionSummary,
    OutputFormat,
    ResultSet,
    registry,
)
from semant.services.executors.registry import ExecutorRegistry

logger = logging.getLogger(__name__)


class ProviderNotFoundError(LookupError):
    pass


@dataclass(slots=True)
class AnalysisRun:
    summary: ExecutionSummary
    results: dict[str, ResultSet]
    events: list[AnalysisExecutionProgress] = field(default_factory=list)


class AnalysisService:
    def __init__(self, executors: ExecutorRegistry | None = None) -> None:
        self._executors = executors or registry

    def run(
        self,
        documents: Iterable[tuple[str, str]],
        *,
        provider: str = "bitext",
        key: str | None = None,
        secret: str | None = None,
        language: str | None = None,
        output_format: OutputFormat = OutputFormat.XML,
        debug: bool = False,
        stop_after_failures: int | None = None,
    ) -> AnalysisRun:
        executor = self._executors.get(provider)
        if executor is None:
            raise ProviderNotFoundError(provider)

        settings = get_settings()
        results: dict[str, ResultSet] = {}
        for document_id, text in documents:
            results[document_id] = ResultSet(source=text)

        events: list[AnalysisExecutionProgress] = []

        def _on_progress(_provider: str, event: AnalysisExecutionProgress) -> bool:
            events.append(event)
            return stop_after_failures is None or event.failed < stop_after_failures

        context = ExecutionContext(
            key=key or settings.bitext_user or "",
            secret=secret or settings.bitext_password or "",
            language=language or settings.default_language,
            results=results,
            format=output_format,
            use_debug_mode=debug,
            progress_callback=_on_progress,
        )
        summary = executor.execute(context)
        logger.info(
            "%s run finished: total=%s processed=%s failed=%s canceled=%s",
            summary.provider,
            summary.total,
            summary.processed,
            summary.failed,
            summary.canceled,
        )
        return AnalysisRun(summary=summary, results=results, events=events)


analysis_service = AnalysisService()
