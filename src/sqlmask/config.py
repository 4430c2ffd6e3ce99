"""
Runtime configuration read from the environment.

Environment variables:
    SQLMASK_DEFAULT_MASK_CHAR: Mask character used by the CLI and the
        standard masking pipeline when none is given (default: *)
"""

import os

MASK_CHAR_ENV = "SQLMASK_DEFAULT_MASK_CHAR"
FALLBACK_MASK_CHAR = "*"


def default_mask_char() -> str:
    """Mask character from SQLMASK_DEFAULT_MASK_CHAR, defaulting to '*'."""
    return os.getenv(MASK_CHAR_ENV) or FALLBACK_MASK_CHAR
