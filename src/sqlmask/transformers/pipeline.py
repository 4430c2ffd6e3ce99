"""
Transformation pipeline.

Applies masking transformers to every row of a batch, selecting the
transformers for each field by regex pattern on the field name.
"""

import logging
import re
from re import Pattern
from typing import Any

from opentelemetry import trace

from sqlmask.utils.tracing import trace_operation

from .base import Transformer

logger = logging.getLogger(__name__)


class TransformationPipeline:
    """
    Chain multiple transformers for fields matching patterns.

    Rows are dictionaries of field_name -> value. A field runs through
    every transformer whose pattern matches its name, in registration
    order. Transformers see the row as it was before masking started.
    """

    def __init__(self):
        self._rules: dict[str, tuple[Pattern, list[Transformer]]] = {}

    def add_transformer(
        self,
        field_pattern: str,
        transformer: Transformer,
        case_sensitive: bool = False,
    ) -> None:
        """
        Add transformer for fields matching pattern.

        Args:
            field_pattern: Regex pattern matched against the start of field names
            transformer: Transformer to apply
            case_sensitive: Whether pattern matching is case sensitive

        Raises:
            re.error: If field_pattern is not a valid regex
        """
        flags = 0 if case_sensitive else re.IGNORECASE
        compiled = re.compile(field_pattern, flags)

        # Last registration decides the flags for a shared pattern
        transformers = self._rules.get(field_pattern, (compiled, []))[1]
        transformers.append(transformer)
        self._rules[field_pattern] = (compiled, transformers)

        logger.debug(f"Added {transformer.get_type()} for pattern '{field_pattern}'")

    def transformers_for(self, field_name: str) -> list[Transformer]:
        """Transformers that apply to a field, in the order they run."""
        return [
            transformer
            for pattern, transformers in self._rules.values()
            if pattern.match(field_name)
            for transformer in transformers
        ]

    def transform_row(self, row: dict[str, Any]) -> dict[str, Any]:
        """
        Transform all fields in row.

        Args:
            row: Dictionary of field_name -> value

        Returns:
            New dictionary with transformed values, the input row is not modified
        """
        with trace_operation(
            "transform_row",
            kind=trace.SpanKind.INTERNAL,
            field_count=len(row),
        ):
            snapshot = dict(row)
            transformed = {}

            for field_name, value in snapshot.items():
                context = {"field_name": field_name, "row": snapshot}
                for transformer in self.transformers_for(field_name):
                    value = transformer.transform(value, context)
                transformed[field_name] = value

            return transformed

    def transform_rows(self, rows: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Transform a batch of rows."""
        return [self.transform_row(row) for row in rows]

    def get_transformer_count(self) -> int:
        """Get total number of registered transformers."""
        return sum(len(transformers) for _, transformers in self._rules.values())

    def get_patterns(self) -> list[str]:
        """Get list of registered field patterns."""
        return list(self._rules)
