"""Executor adapters export."""

from .base import (
    AnalysisExecutionProgress,
    AnalysisExecutionStatus,
    AnalysisOutput,
    ExecutionContext,
    ExecutionSummary,
    ExecutorAdapter,
    OutputFormat,
    ResultSet,
)
from .registry import registry

__all__ = [
    "AnalysisExecutionProgress",
    "AnalysisExecutionStatus",
    "AnalysisOutput",
    "ExecutionContext",
    "ExecutionSummary",
    "ExecutorAdapter",
    "OutputFormat",
    "ResultSet",
    "registry",
]
