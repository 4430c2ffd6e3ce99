"""
String masking primitives.

Pure, stateless string functions exposed to the query engine as scalar
functions:
- mask_string: mask a run of characters chosen by 1-based start and length
- mask_email: keep the first character and the domain, mask the rest
- scramble_string: random permutation of the characters of a string

None of these functions raise for string input. Out of range offsets clamp,
and inputs that cannot be masked come back unchanged.
"""

import logging
import random
import threading

logger = logging.getLogger(__name__)

# Names the functions are registered under in the query engine
MASK_STRING = "mask_string"
MASK_EMAIL = "mask_email"
SCRAMBLE_STRING = "scramble_string"

EMAIL_MASK_CHAR = "*"
DEFAULT_MASK_CHAR = " "

_local = threading.local()


def _thread_rng() -> random.Random:
    """Return this thread's generator, seeding it from OS entropy on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random(random.SystemRandom().getrandbits(128))
        _local.rng = rng
    return rng


def mask_string(value: str, start: int, length: int, mask_char: str = "*") -> str:
    """
    Mask a contiguous run of characters.

    Args:
        value: String to mask
        start: 1-based position of the first masked character
        length: Number of characters to mask
        mask_char: Mask string, only its first character is used

    Returns:
        String of the same length with the run replaced by mask_char

    Examples:
        mask_string("hello world", 3, 5, "*") -> "he*****orld"
        mask_string("hello world", 1, 100, "*") -> "***********"
    """
    size = len(value)

    # 1-based to 0-based, clamped to [0, size]
    begin = max(0, min(start - 1, size))
    end = max(begin, min(begin + length, size))

    if mask_char:
        char = mask_char[0]
    else:
        logger.debug("Empty mask character, using default")
        char = DEFAULT_MASK_CHAR

    return value[:begin] + char * (end - begin) + value[end:]


def mask_email(value: str) -> str:
    """
    Mask the local part of an email address.

    The first character and everything from the first "@" onwards are kept.
    Strings without "@", or starting with it, are returned unchanged.

    Examples:
        johndoe@example.com -> j******@example.com
        a@b.com -> a@b.com
    """
    at_pos = value.find("@")
    if at_pos <= 0:
        return value

    return value[:1] + EMAIL_MASK_CHAR * (at_pos - 1) + value[at_pos:]


def scramble_string(value: str) -> str:
    """
    Randomly reorder the characters of a string.

    Uses a Fisher-Yates shuffle driven by a per-thread generator. The result
    may equal the input, especially for short strings.
    """
    if not value:
        return value

    chars = list(value)
    rng = _thread_rng()

    for i in range(len(chars) - 1, 0, -1):
        j = rng.randint(0, i)
        chars[i], chars[j] = chars[j], chars[i]

    return "".join(chars)
