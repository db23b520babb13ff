"""Bitext sentiment adapter."""

from __future__ import annotations

import logging
import time
from urllib.parse import quote_plus

import httpx

from semant.constants.languages import to_bitext_language
from semant.core.config import Settings, get_settings

from .base import (
    AnalysisExecutionProgress,
    AnalysisExecutionStatus,
    ExecutionContext,
    ExecutionSummary,
    ExecutorAdapter,
)
from .bitext_payload import detect_encoding, parse_payload, polarity_label

ACCEPTED_STATUS_CODES = (httpx.codes.OK, httpx.codes.ACCEPTED)
FAILED_LABEL = "failed"


class BitextExecutorAdapter(ExecutorAdapter):
    provider = "Bitext"

    def __init__(self, settings: Settings | None = None) -> None:
        self._logger = logging.getLogger(__name__)
        self._settings = settings or get_settings()

    def execute(self, context: ExecutionContext) -> ExecutionSummary:
        total = len(context.results)
        if total == 0:
            context.on_progress(
                self.provider,
                AnalysisExecutionProgress(AnalysisExecutionStatus.CANCELED, 0, 0, 0),
            )
            return ExecutionSummary(provider=self.provider, total=0, processed=0, failed=0, canceled=True)

        processed = 0
        failed = 0
        canceled = False
        for document_id, document in context.results.items():
            if len(document.source) > self._settings.bitext_max_source_length:
                failed += 1
                document.add_output(self.provider, 0, FAILED_LABEL)
                self._logger.warning(
                    "Bitext: document %s rejected, %s characters exceeds %s",
                    document_id,
                    len(document.source),
                    self._settings.bitext_max_source_length,
                )
                event = AnalysisExecutionProgress(AnalysisExecutionStatus.FAILED, total, processed, failed)
            else:
                try:
                    response = self._send(context, document_id, document.source)
                    if response.status_code not in ACCEPTED_STATUS_CODES:
                        failed += 1
                        document.add_output(self.provider, 0, FAILED_LABEL)
                        self._logger.warning(
                            "Bitext: document %s rejected by service (status=%s)",
                            document_id,
                            response.status_code,
                        )
                        event = AnalysisExecutionProgress(
                            AnalysisExecutionStatus.FAILED,
                            total,
                            processed,
                            failed,
                            reason=f"HTTP {response.status_code}",
                        )
                    else:
                        sentiment = parse_payload(self._read_body(response))
                        score = sentiment.mean_score()
                        processed += 1
                        document.add_output(self.provider, score, polarity_label(score))
                        event = AnalysisExecutionProgress(AnalysisExecutionStatus.PROCESSED, total, processed, failed)
                except Exception as exc:
                    failed += 1
                    document.add_output(self.provider, 0, FAILED_LABEL)
                    if isinstance(exc, httpx.HTTPError):
                        self._logger.exception("Bitext: request for document %s failed: %s", document_id, exc)
                    else:
                        self._logger.warning("Bitext: document %s failed: %s", document_id, exc)
                    event = AnalysisExecutionProgress(
                        AnalysisExecutionStatus.FAILED, total, processed, failed, reason=str(exc)
                    )

            if not context.on_progress(self.provider, event):
                canceled = True
                break

        context.on_progress(
            self.provider,
            AnalysisExecutionProgress(AnalysisExecutionStatus.SUCCESS, total, processed, failed),
        )
        return ExecutionSummary(
            provider=self.provider,
            total=total,
            processed=processed,
            failed=failed,
            canceled=canceled,
        )

    def build_payload(self, context: ExecutionContext, document_id: str, source: str) -> str:
        # Order matters to the service; only Text is URL-encoded.
        parameters = [
            ("User", context.key),
            ("Pass", context.secret),
            ("OutFormat", context.format.value),
            ("Detail", "Global"),
            ("Normalized", "No"),
            ("Theme", "Gen"),
            ("ID", document_id),
            ("Lang", to_bitext_language(context.language)),
            ("Text", quote_plus(source)),
        ]
        return "&".join(f"{name}={value}" for name, value in parameters)

    def _send(self, context: ExecutionContext, document_id: str, source: str) -> httpx.Response:
        payload = self.build_payload(context, document_id, source)
        started = time.perf_counter()
        response = httpx.post(
            self._settings.bitext_endpoint,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            content=payload.encode("utf-8"),
            timeout=self._settings.bitext_timeout,
        )
        if context.use_debug_mode:
            self._logger.info(
                "Bitext: sentiment for document %s retrieved in %.1f ms",
                document_id,
                (time.perf_counter() - started) * 1000,
            )
        return response

    def _read_body(self, response: httpx.Response) -> str:
        # Without a charset header, decode with whatever the XML prolog declares.
        if not response.charset_encoding:
            head = response.content[:256].decode("ascii", errors="ignore")
            response.encoding = detect_encoding(head)
        return response.text
