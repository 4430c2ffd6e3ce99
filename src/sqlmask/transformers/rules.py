"""
Pipeline factories.

Provides pre-configured masking pipelines for common field naming
conventions.
"""

import logging

from sqlmask.config import default_mask_char

from .maskers import EmailMaskTransformer, ScrambleTransformer, TailPreservingMaskTransformer
from .pipeline import TransformationPipeline

logger = logging.getLogger(__name__)


def create_masking_pipeline(
    mask_char: str | None = None,
    keep_last: int = 4,
) -> TransformationPipeline:
    """
    Create standard masking pipeline.

    Email fields get their local part masked, phone/SSN/card fields keep
    only their last characters visible, and secrets are scrambled.

    Args:
        mask_char: Mask character for phone/SSN/card fields. Defaults to
                   SQLMASK_DEFAULT_MASK_CHAR or '*'.
        keep_last: Number of trailing characters left visible in
                   phone, SSN and card fields

    Returns:
        Configured TransformationPipeline

    Raises:
        ValueError: If keep_last is negative
    """
    if mask_char is None:
        mask_char = default_mask_char()

    pipeline = TransformationPipeline()

    pipeline.add_transformer(r".*email.*", EmailMaskTransformer())

    tail_masker = TailPreservingMaskTransformer(keep_last=keep_last, mask_char=mask_char)
    pipeline.add_transformer(r".*phone.*", tail_masker)
    pipeline.add_transformer(r".*mobile.*", tail_masker)
    pipeline.add_transformer(r".*ssn.*", tail_masker)
    pipeline.add_transformer(r".*credit.*card.*", tail_masker)
    pipeline.add_transformer(r".*cc_number.*", tail_masker)

    scrambler = ScrambleTransformer()
    pipeline.add_transformer(r".*password.*", scrambler)
    pipeline.add_transformer(r".*secret.*", scrambler)
    pipeline.add_transformer(r".*token.*", scrambler)

    logger.info(
        f"Created masking pipeline with {pipeline.get_transformer_count()} transformers"
    )

    return pipeline
