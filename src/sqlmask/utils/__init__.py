"""
Utility modules for sqlmask

Provides:
- logging: structured logging configuration
- tracing: OpenTelemetry spans
"""

__all__ = ["logging", "tracing"]
