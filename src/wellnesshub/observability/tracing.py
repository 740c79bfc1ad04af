"""
OpenTelemetry tracing helpers for WellnessHub.

Provides custom spans around the booking workflow and the appointment
lifecycle. Without a configured SDK the API returns non-recording spans,
so these helpers are safe to call in tests.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from opentelemetry import trace
from opentelemetry.trace import Span, Status, StatusCode

logger = logging.getLogger(__name__)

tracer = trace.get_tracer("wellnesshub")


@contextmanager
def trace_operation(operation_name: str, attributes: Optional[dict] = None) -> Iterator[Span]:
    """
    Context manager for creating custom tracing spans.

    Exceptions raised inside the block are recorded on the span and re-raised.

    Example:
        with trace_operation("booking.book_appointment", {"practitioner_id": pid}):
            appointment = await use_case.execute(request)
    """
    with tracer.start_as_current_span(operation_name) as span:
        if attributes:
            for key, value in attributes.items():
                if value is not None:
                    span.set_attribute(key, str(value))
        yield span


def set_span_status(span: Optional[Span], success: bool, error_message: Optional[str] = None) -> None:
    """Set the status of a tracing span."""
    if span is None:
        return
    if success:
        span.set_status(Status(StatusCode.OK))
    else:
        span.set_status(Status(StatusCode.ERROR, error_message or "Operation failed"))
