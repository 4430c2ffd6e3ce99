"""
Row-level masking transformers.

Supports:
- Positional masking of fixed character runs
- Email local-part masking
- Character scrambling
- Configurable transformation pipelines keyed by field name

Designed to apply the masking functions across batches of rows outside
the query engine, the same way the engine applies them per row.
"""

from .base import StringFunctionTransformer, Transformer
from .maskers import (
    EmailMaskTransformer,
    PositionalMaskTransformer,
    ScrambleTransformer,
    TailPreservingMaskTransformer,
)
from .pipeline import TransformationPipeline
from .rules import create_masking_pipeline

__all__ = [
    "Transformer",
    "StringFunctionTransformer",
    "PositionalMaskTransformer",
    "TailPreservingMaskTransformer",
    "EmailMaskTransformer",
    "ScrambleTransformer",
    "TransformationPipeline",
    "create_masking_pipeline",
]
