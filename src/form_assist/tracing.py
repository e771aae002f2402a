"""
Tracing configuration for Form Assist.

This module provides tracing setup using OpenAI Agents SDK's built-in
tracing capabilities. Traces can be viewed in the OpenAI dashboard,
logged, or appended to a JSON Lines file.
"""

import json
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from agents import set_tracing_disabled, trace
from agents.tracing import (
    Span,
    Trace,
    TracingProcessor,
    set_trace_processors,
)


logger = logging.getLogger(__name__)


class LoggingTracingProcessor(TracingProcessor):
    """
    A tracing processor that reports traces through the logging module.

    Useful for development and debugging.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the logging tracing processor.

        Args:
            verbose: If True, log every span as well.
        """
        self.verbose = verbose

    def on_trace_start(self, trace: Trace) -> None:
        logger.info(f"[TRACE START] {trace.name} (ID: {trace.trace_id[:8]}...)")

    def on_trace_end(self, trace: Trace) -> None:
        logger.info(f"[TRACE END] {trace.name}")

    def on_span_start(self, span: Span[Any]) -> None:
        if self.verbose:
            logger.debug(f"[SPAN START] {span.span_data}")

    def on_span_end(self, span: Span[Any]) -> None:
        if self.verbose:
            logger.debug(f"[SPAN END] {span.span_data}")

    def shutdown(self) -> None:
        pass

    def force_flush(self) -> None:
        pass


class FileTracingProcessor(TracingProcessor):
    """
    A tracing processor that appends finished traces to a JSON Lines file.
    """

    def __init__(self, file_path: str = "traces.jsonl"):
        self.file_path = file_path
        self._traces: dict[str, dict[str, Any]] = {}

    def on_trace_start(self, trace: Trace) -> None:
        self._traces[trace.trace_id] = {
            "trace_id": trace.trace_id,
            "name": trace.name,
            "spans": [],
        }

    def on_trace_end(self, trace: Trace) -> None:
        record = self._traces.pop(trace.trace_id, None)
        if record is not None:
            with open(self.file_path, "a") as f:
                f.write(json.dumps(record) + "\n")

    def on_span_start(self, span: Span[Any]) -> None:
        pass

    def on_span_end(self, span: Span[Any]) -> None:
        record = self._traces.get(span.trace_id)
        if record is not None:
            record["spans"].append({
                "span_id": span.span_id,
                "data": str(span.span_data),
            })

    def shutdown(self) -> None:
        pass

    def force_flush(self) -> None:
        pass


def setup_tracing(
    enabled: bool = True,
    console: bool = False,
    verbose: bool = False,
    file_path: str | None = None,
) -> None:
    """
    Configure tracing for Form Assist.

    By default, traces are sent to the OpenAI dashboard if you have
    an OpenAI API key configured.

    Args:
        enabled: Whether tracing is enabled.
        console: Whether to report traces through the logging module.
        verbose: Whether to log detailed span information.
        file_path: Optional file path to write traces to.
    """
    if not enabled:
        set_tracing_disabled(True)
        return

    set_tracing_disabled(False)

    processors: list[TracingProcessor] = []

    if console:
        processors.append(LoggingTracingProcessor(verbose=verbose))

    if file_path:
        processors.append(FileTracingProcessor(file_path=file_path))

    if processors:
        set_trace_processors(processors)


@asynccontextmanager
async def traced_operation(
    name: str,
    metadata: dict[str, Any] | None = None,
) -> AsyncGenerator[None, None]:
    """
    Context manager for tracing a specific operation.

    Example:
        >>> async with traced_operation("form_assist", {"complexity": "3"}):
        ...     result = await generator.generate(message, components, 3)
    """
    with trace(name, metadata=metadata):
        yield
