"""Shared execution context/adapter definitions."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class AnalysisExecutionStatus(str, Enum):
    CANCELED = "canceled"
    FAILED = "failed"
    PROCESSED = "processed"
    SUCCESS = "success"


class OutputFormat(str, Enum):
    XML = "XML"
    JSON = "JSON"


@dataclass(slots=True, frozen=True)
class AnalysisOutput:
    provider: str
    score: float
    label: str


@dataclass(slots=True)
class ResultSet:
    """Source text of one document plus the outputs appended by executors."""

    source: str
    outputs: list[AnalysisOutput] = field(default_factory=list)

    def add_output(self, provider: str, score: float, label: str) -> AnalysisOutput:
        output = AnalysisOutput(provider=provider, score=float(score), label=label)
        self.outputs.append(output)
        return output


@dataclass(slots=True)
class AnalysisExecutionProgress:
    """Progress notification handed to the caller after each document.

    The receiver may set ``cancel`` to stop the run after the current document.
    """

    status: AnalysisExecutionStatus
    total: int
    processed: int
    failed: int
    cancel: bool = False
    reason: str | None = None


# Returning False from the callback (or setting ``event.cancel``) stops the run.
ProgressCallback = Callable[[str, AnalysisExecutionProgress], "bool | None"]


@dataclass(slots=True, frozen=True)
class ExecutionContext:
    key: str
    secret: str
    language: str
    results: Mapping[str, ResultSet]
    format: OutputFormat = OutputFormat.XML
    use_debug_mode: bool = False
    progress_callback: ProgressCallback | None = None

    def on_progress(self, provider: str, event: AnalysisExecutionProgress) -> bool:
        """Deliver ``event`` and report whether the executor should keep going."""
        if self.progress_callback is None:
            return True
        verdict = self.progress_callback(provider, event)
        return verdict is not False and not event.cancel


@dataclass(slots=True, frozen=True)
class ExecutionSummary:
    provider: str
    total: int
    processed: int
    failed: int
    canceled: bool = False


class ExecutorAdapter(Protocol):
    """Protocol for executor implementations."""

    provider: str

    def execute(self, context: ExecutionContext) -> ExecutionSummary:
        ...
