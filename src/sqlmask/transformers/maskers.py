"""
Masking transformers.

Wrap the string masking primitives so they can be applied to row values
by a TransformationPipeline.
"""

from sqlmask.functions import mask_email, mask_string, scramble_string

from .base import StringFunctionTransformer


class PositionalMaskTransformer(StringFunctionTransformer):
    """
    Mask a run of characters chosen by 1-based start and length.

    Examples:
        start=3, length=5: hello world -> he*****orld
        start=1, length=100: hello world -> ***********
    """

    def __init__(self, start: int = 1, length: int = 0, mask_char: str = "*"):
        """
        Initialize positional masking transformer.

        Args:
            start: 1-based position of the first masked character
            length: Number of characters to mask
            mask_char: Mask string, only its first character is used

        Raises:
            ValueError: If start or length is not an integer
        """
        # bool is an int subclass but never a meaningful offset
        for name, number in (("start", start), ("length", length)):
            if isinstance(number, bool) or not isinstance(number, int):
                raise ValueError(f"{name} must be an integer, got {type(number).__name__}")

        if not isinstance(mask_char, str):
            raise ValueError(f"mask_char must be a string, got {type(mask_char).__name__}")

        self.start = start
        self.length = length
        self.mask_char = mask_char

    def apply(self, value: str) -> str:
        return mask_string(value, self.start, self.length, self.mask_char)


class EmailMaskTransformer(StringFunctionTransformer):
    """
    Mask the local part of email addresses.

    Examples:
        johndoe@example.com -> j******@example.com
        @example.com -> @example.com
    """

    def apply(self, value: str) -> str:
        return mask_email(value)


class ScrambleTransformer(StringFunctionTransformer):
    """Randomly reorder the characters of string values."""

    def apply(self, value: str) -> str:
        return scramble_string(value)


class TailPreservingMaskTransformer(StringFunctionTransformer):
    """
    Mask everything except the last `keep_last` characters.

    Examples:
        keep_last=4: 4532-1234-5678-9010 -> ***************9010
        keep_last=4: 123 -> 123
    """

    def __init__(self, keep_last: int = 4, mask_char: str = "*"):
        """
        Initialize tail preserving masking transformer.

        Args:
            keep_last: Number of trailing characters left visible
            mask_char: Mask string, only its first character is used

        Raises:
            ValueError: If keep_last is not a non-negative integer
        """
        if isinstance(keep_last, bool) or not isinstance(keep_last, int):
            raise ValueError(f"keep_last must be an integer, got {type(keep_last).__name__}")

        if keep_last < 0:
            raise ValueError(f"keep_last must be non-negative, got {keep_last}")

        self.keep_last = keep_last
        self.mask_char = mask_char

    def apply(self, value: str) -> str:
        return mask_string(value, 1, len(value) - self.keep_last, self.mask_char)
