"""
Observability helpers (tracing).
"""

from .tracing import set_span_status, trace_operation

__all__ = ["set_span_status", "trace_operation"]
