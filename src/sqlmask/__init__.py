"""
String masking functions for DuckDB.

Provides positional masking, email masking and character scrambling as
plain Python functions, DuckDB scalar functions and row transformers.
"""

from sqlmask.functions import mask_email, mask_string, scramble_string

__version__ = "1.0.0"
__all__ = ["mask_string", "mask_email", "scramble_string"]
