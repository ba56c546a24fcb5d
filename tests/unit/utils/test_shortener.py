"""Unit tests for the generate_shortcode function in shortener.py.

Test coverage includes:

1. Basic functionality
   - Ensures the function returns an 8-character string by default.

2. Output format
   - All characters belong to the lowercase hex alphabet.

3. Randomness
   - Consecutive calls produce different short codes.

4. Length parameter
   - Custom lengths are respected, invalid lengths raise ValueError.
"""

import re
import uuid

import pytest

from s3shortener.utils import generate_shortcode
from s3shortener.utils import shortener


# -------------------------------
# 1. Basic functionality and type
# -------------------------------

def test_generate_shortcode_returns_8_characters():
    result = generate_shortcode()
    assert isinstance(result, str)
    assert len(result) == 8


def test_generate_shortcode_is_uuid_prefix(monkeypatch):
    """Ensure the short code is the first 8 characters of a canonical UUID4 string."""
    fixed = uuid.UUID('1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed')
    monkeypatch.setattr(shortener.uuid, 'uuid4', lambda: fixed)
    assert generate_shortcode() == '1b9d6bcd'


# -------------------------------
# 2. Output format
# -------------------------------

@pytest.mark.parametrize('_', range(50))
def test_generate_shortcode_is_lowercase_hex(_):
    assert re.fullmatch(r'[0-9a-f-]{8}', generate_shortcode())


# -------------------------------
# 3. Randomness
# -------------------------------

def test_generate_shortcode_is_random():
    codes = {generate_shortcode() for _ in range(100)}
    assert len(codes) > 1


# -------------------------------
# 4. Length parameter
# -------------------------------

@pytest.mark.parametrize('length', [1, 8, 13, 36])
def test_generate_shortcode_respects_length(length):
    assert len(generate_shortcode(length=length)) == length


@pytest.mark.parametrize('length', [0, -1, 37])
def test_generate_shortcode_rejects_invalid_length(length):
    with pytest.raises(ValueError):
        generate_shortcode(length=length)
