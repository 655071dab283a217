"""Console telemetry provider that logs span summaries via Python logging."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from roomsweep.telemetry.base import Span, SpanKind, TelemetryProvider

logger = logging.getLogger("roomsweep.telemetry")


def _format_attrs(attributes: dict[str, Any]) -> str:
    if not attributes:
        return ""
    return " [" + ", ".join(f"{k}={v}" for k, v in attributes.items()) + "]"


class ConsoleTelemetryProvider(TelemetryProvider):
    """Logs span completion and metrics to the ``roomsweep.telemetry`` logger.

    Example::

        import logging
        logging.basicConfig(level=logging.INFO)

        job = CleanupJob(..., telemetry=ConsoleTelemetryProvider())
    """

    def __init__(self, *, level: int = logging.INFO) -> None:
        self._level = level
        self._spans: dict[str, Span] = {}

    @property
    def name(self) -> str:
        return "console"

    def start_span(
        self,
        kind: SpanKind,
        name: str,
        *,
        parent_id: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> str:
        span = Span(
            kind=kind,
            name=name,
            parent_id=parent_id,
            attributes=dict(attributes) if attributes else {},
        )
        self._spans[span.id] = span
        return span.id

    def end_span(
        self,
        span_id: str,
        *,
        status: str = "ok",
        error_message: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        span = self._spans.pop(span_id, None)
        if span is None:
            return
        span.end_time = datetime.now(UTC)
        span.status = status
        span.error_message = error_message
        if attributes:
            span.attributes.update(attributes)

        duration = span.duration_ms
        dur_str = f" {duration:.1f}ms" if duration is not None else ""
        attr_str = _format_attrs(span.attributes)
        if status == "error":
            logger.log(
                self._level,
                "[SPAN ERROR] %s %s%s%s error=%s",
                span.kind,
                span.name,
                dur_str,
                attr_str,
                error_message or "unknown",
            )
        else:
            logger.log(
                self._level, "[SPAN END] %s %s%s%s", span.kind, span.name, dur_str, attr_str
            )

    def set_attribute(self, span_id: str, key: str, value: Any) -> None:
        span = self._spans.get(span_id)
        if span is not None:
            span.attributes[key] = value

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        unit_str = f" {unit}" if unit else ""
        attr_str = _format_attrs(attributes or {})
        logger.log(self._level, "[METRIC] %s = %.2f%s%s", name, value, unit_str, attr_str)
