"""
Base transformer class and common utilities.

Provides abstract base class for all masking transformers and shared
metrics for tracking transformation operations.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# Metrics
TRANSFORMATIONS_APPLIED = Counter(
    "transformations_applied_total",
    "Total transformations applied",
    ["transformer_type", "field_pattern"],
)

TRANSFORMATION_TIME = Histogram(
    "transformation_seconds",
    "Time to apply transformations",
    ["transformer_type"],
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1],
)

TRANSFORMATION_ERRORS = Counter(
    "transformation_errors_total",
    "Transformation errors",
    ["transformer_type", "error_type"],
)


class Transformer(ABC):
    """Base class for value transformers."""

    @abstractmethod
    def transform(self, value: Any, context: dict[str, Any]) -> Any:
        """
        Transform a single value.

        Args:
            value: Value to transform
            context: Transformation context (field_name, row, etc.)

        Returns:
            Transformed value
        """
        pass

    def get_type(self) -> str:
        """Get transformer type for metrics."""
        return self.__class__.__name__


class StringFunctionTransformer(Transformer):
    """
    Apply a string masking function to string values.

    Non-string values (including None) pass through unchanged. Failures
    are counted and logged, and the input value is returned.
    """

    @abstractmethod
    def apply(self, value: str) -> str:
        """Return the masked form of a string value."""
        pass

    def transform(self, value: Any, context: dict[str, Any]) -> Any:
        with TRANSFORMATION_TIME.labels(transformer_type=self.get_type()).time():
            if not isinstance(value, str):
                return value

            try:
                result = self.apply(value)
            except Exception as e:
                TRANSFORMATION_ERRORS.labels(
                    transformer_type=self.get_type(),
                    error_type=type(e).__name__,
                ).inc()
                # Values are PII, log the error type only
                logger.warning(f"{self.get_type()} failed: {type(e).__name__}")
                return value

            if result != value:
                TRANSFORMATIONS_APPLIED.labels(
                    transformer_type=self.get_type(),
                    field_pattern=context.get("field_name", "unknown"),
                ).inc()

            return result
