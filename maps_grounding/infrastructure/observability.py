"""
Observability configuration for the Maps grounding MCP server.

Provides OpenTelemetry-based tracing for:
- Custom span creation around MCP tool invocations
- Workflow step events (duration, success, error detail)

Spans are exported by whatever tracer provider is installed in the process
(e.g. when launched under `opentelemetry-instrument`). Without one, the API's
no-op provider is used and nothing is exported.

Environment Variables:
    AGENT_OBSERVABILITY_ENABLED: Enable observability (default: true)
    OTEL_SERVICE_NAME: Tracer name (default: maps-grounding-mcp)
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Optional

from loguru import logger
from opentelemetry import trace
from opentelemetry.trace import SpanKind, Status, StatusCode


class ObservabilityManager:
    """Manages OpenTelemetry spans for the MCP server."""

    def __init__(
        self,
        service_name: str = "maps-grounding-mcp",
        enabled: bool = True,
    ) -> None:
        self.service_name = service_name
        self.enabled = enabled
        self._tracer = None

        if self.enabled:
            self._tracer = trace.get_tracer(
                instrumenting_module_name=service_name,
                tracer_provider=trace.get_tracer_provider(),
            )
            logger.info(f"Observability initialized for service: {service_name}")
        else:
            logger.info("Observability disabled")

    # ------------------------------------------------------------------
    # Span creation
    # ------------------------------------------------------------------

    @contextmanager
    def create_span(
        self,
        name: str,
        kind: SpanKind = SpanKind.INTERNAL,
        attributes: Optional[dict] = None,
    ):
        """
        Create a custom span for detailed tracing.

        Args:
            name: Span name (e.g. "mcp.tool.google_maps_search").
            kind: SpanKind (defaults to INTERNAL).
            attributes: Custom attributes to attach.
        """
        if not self.enabled or self._tracer is None:
            yield None
            return

        with self._tracer.start_as_current_span(
            name=name,
            kind=kind,
            attributes=attributes or {},
            record_exception=False,
            set_status_on_exception=False,
        ) as span:
            try:
                yield span
            except Exception as e:
                span.set_status(Status(StatusCode.ERROR, str(e)))
                span.record_exception(e)
                raise

    def record_workflow_step(
        self,
        step_name: str,
        step_type: str,
        duration_ms: Optional[float] = None,
        success: bool = True,
        metadata: Optional[dict] = None,
    ) -> None:
        """Attach a `workflow.<step_name>` event to the current span, if it is recording."""
        if not self.enabled:
            return

        current_span = trace.get_current_span()
        if not current_span.is_recording():
            return

        attributes: dict = {
            "workflow.step.name": step_name,
            "workflow.step.type": step_type,
            "workflow.step.success": success,
        }

        if duration_ms is not None:
            attributes["workflow.step.duration_ms"] = duration_ms

        if metadata:
            for key, value in metadata.items():
                attributes[f"workflow.step.{key}"] = str(value)

        current_span.add_event(f"workflow.{step_name}", attributes=attributes)


# ------------------------------------------------------------------
# Singleton
# ------------------------------------------------------------------

_observability_manager: ObservabilityManager | None = None


def get_observability_manager() -> ObservabilityManager:
    """Return the global ObservabilityManager singleton (lazy-init)."""
    global _observability_manager

    if _observability_manager is None:
        from maps_grounding.config import settings

        _observability_manager = ObservabilityManager(
            service_name=settings.OTEL_SERVICE_NAME,
            enabled=settings.AGENT_OBSERVABILITY_ENABLED,
        )

    return _observability_manager


def initialize_observability(
    service_name: str = "maps-grounding-mcp",
    enabled: bool = True,
) -> ObservabilityManager:
    """Initialize the global observability manager at startup."""
    global _observability_manager

    _observability_manager = ObservabilityManager(
        service_name=service_name,
        enabled=enabled,
    )

    return _observability_manager
