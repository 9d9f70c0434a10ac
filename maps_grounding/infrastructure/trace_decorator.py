"""
Trace decorator for MCP tool handlers.

Wraps an async handler in an OpenTelemetry span carrying the handler type,
the handler name, and each bound argument as a string attribute. Duration
and success/failure are recorded as a workflow-step event on the span.
Failures are re-raised unlogged; the handler owns error logging.

Usage:
    @mcp.tool(...)
    @traced(span_name="mcp.tool.google_maps_search")
    async def google_maps_search(query: str, ...) -> str:
        ...
"""

from __future__ import annotations

import functools
import inspect
import time
from typing import Any, Callable

from loguru import logger

from maps_grounding.infrastructure.observability import get_observability_manager


def traced(
    span_name: str,
    handler_type: str = "tool",
) -> Callable:
    def decorator(func: Callable) -> Callable:
        sig = inspect.signature(func)

        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            observability = get_observability_manager()

            bound = sig.bind(*args, **kwargs)
            bound.apply_defaults()

            span_attributes: dict[str, Any] = {
                "mcp.handler.type": handler_type,
                "mcp.handler.name": func.__name__,
            }
            for param_name, param_value in bound.arguments.items():
                span_attributes[f"mcp.{handler_type}.param.{param_name}"] = str(param_value)

            start_time = time.monotonic()

            with observability.create_span(
                name=span_name,
                attributes=span_attributes,
            ):
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    duration_ms = (time.monotonic() - start_time) * 1000
                    observability.record_workflow_step(
                        step_name=func.__name__,
                        step_type=handler_type,
                        duration_ms=round(duration_ms, 2),
                        success=False,
                        metadata={"error": str(e)},
                    )
                    raise

                duration_ms = (time.monotonic() - start_time) * 1000
                observability.record_workflow_step(
                    step_name=func.__name__,
                    step_type=handler_type,
                    duration_ms=round(duration_ms, 2),
                    success=True,
                )
                logger.debug(f"[trace] {span_name} completed in {duration_ms:.1f}ms")
                return result

        return wrapper

    return decorator
