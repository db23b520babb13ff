"""Executor adapter registry."""

from __future__ import annotations

from typing import Dict

from .base import ExecutorAdapter
from .bitext import BitextExecutorAdapter
from .mock import MockExecutorAdapter


class ExecutorRegistry:
    def __init__(self) -> None:
        self._adapters: Dict[str, ExecutorAdapter] = {}

    def register(self, provider: str, adapter: ExecutorAdapter) -> None:
        self._adapters[provider.lower()] = adapter

    def get(self, provider: str) -> ExecutorAdapter | None:
        return self._adapters.get((provider or "").lower())

    def providers(self) -> list[str]:
        return sorted(self._adapters)


registry = ExecutorRegistry()
registry.register("mock", MockExecutorAdapter())
registry.register("bitext", BitextExecutorAdapter())
