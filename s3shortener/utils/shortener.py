"""Shortcode generation utility

Functions:
    generate_shortcode(length=8):
        Generate a random short code suitable for use as an S3 object key stem.

Example:
    >>> from s3shortener.utils import generate_shortcode
    >>> generate_shortcode()
    '1b9d6bcd'
"""

import uuid

from s3shortener.constants import SHORTCODE_LENGTH


def generate_shortcode(length: int = SHORTCODE_LENGTH) -> str:
    """Generate a random short code from a UUID4.

    The short code is the first `length` characters of the canonical
    hyphenated form of a random UUID (e.g. '1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed').
    With the default length of 8 only lowercase hex digits are produced.

    Args:
        length (int, optional):
            Number of leading characters to keep. Defaults to 8.

    Returns:
        str: A random short code.

    NOTE:
        - Codes are not content-derived: shortening the same URL twice yields two codes.
        - Truncating to 8 characters leaves 32 bits of randomness, so collisions are
          possible. Nothing checks existing keys before a write, and a colliding
          write overwrites the older record.
    """
    if not 0 < length <= 36:
        raise ValueError(f'Short code length must be between 1 and 36 (given value: {length}).')
    return str(uuid.uuid4())[:length]
