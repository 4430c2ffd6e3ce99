"""
Distributed tracing using OpenTelemetry.

Spans cover function registration, CLI queries and row transformation.
"""

from .context import add_span_attributes, trace_operation
from .decorators import trace_function
from .tracer import get_tracer, initialize_tracing, shutdown_tracing

__all__ = [
    "initialize_tracing",
    "get_tracer",
    "shutdown_tracing",
    "trace_operation",
    "trace_function",
    "add_span_attributes",
]
