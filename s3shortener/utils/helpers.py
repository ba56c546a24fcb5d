"""Helper utilities for AWS lambda functions.

Functions:
    request_body(event: LambdaEvent) -> str
        Extract the raw request body from a Lambda event
    parse_json_object(body: str) -> RequestBody
        Parse a request body as a JSON object
    parse_int64(value: str) -> int
        Parse a decimal string as a signed 64-bit integer

Example:
    Typical usage inside a Lambda handler:

        >>> from s3shortener.utils.helpers import request_body, parse_json_object
        >>> event = {'body': '{"originalUrl": "https://example.com", "expirationTime": "3600"}'}
        >>> parse_json_object(request_body(event))
        {'originalUrl': 'https://example.com', 'expirationTime': '3600'}

        >>> parse_int64('3600')
        3600
"""

import re
import json
import base64

from s3shortener.types import LambdaEvent, RequestBody
from s3shortener.constants import INT64_MIN, INT64_MAX
from s3shortener.exceptions import MalformedRequestError


INT64_PATTERN = re.compile(r'([+-]?)([0-9]+)')
INT64_MAX_DIGITS = 19


def request_body(event: LambdaEvent) -> str:
    """Extract the raw request body from a Lambda event

    API Gateway sets `isBase64Encoded` for binary payloads; such bodies are
    decoded to UTF-8 text.

    Args:
        event (LambdaEvent): Lambda event (API Gateway proxy or direct invocation)

    Returns:
        str: Raw request body text

    Raises:
        MalformedRequestError:
            If the body is missing, not text, or can't be decoded.
    """
    body = event.get('body')
    if body is None:
        raise MalformedRequestError('Error parsing JSON body: missing request body')
    if not isinstance(body, str):
        raise MalformedRequestError(f'Error parsing JSON body: expected a string body (given type: {type(body).__name__})')

    if event.get('isBase64Encoded'):
        try:
            body = base64.b64decode(body, validate=True).decode('utf-8')
        # binascii.Error, UnicodeDecodeError and non-ASCII input are all ValueError
        except ValueError as e:
            raise MalformedRequestError(f'Error parsing JSON body: {e}') from e

    return body


def parse_json_object(body: str) -> RequestBody:
    """Parse a request body as a JSON object

    Raises:
        MalformedRequestError:
            If the body is not valid JSON, or its top-level value is not an object.
    """
    try:
        payload = json.loads(body)
    except json.JSONDecodeError as e:
        raise MalformedRequestError(f'Error parsing JSON body: {e}') from e

    if not isinstance(payload, dict):
        raise MalformedRequestError(f'Error parsing JSON body: expected a JSON object (given type: {type(payload).__name__})')
    return payload


def parse_int64(value: str) -> int:
    """Parse a decimal string as a signed 64-bit integer

    Accepts an optional sign followed by ASCII digits (leading zeros allowed).
    Whitespace, underscores, decimal points, exponents and non-ASCII digits
    are rejected. Values with more than 19 significant digits are rejected
    before conversion.

    Raises:
        MalformedRequestError:
            If the value is not a decimal integer or falls outside the 64-bit range.
    """
    match = INT64_PATTERN.fullmatch(value)
    if match is None:
        raise MalformedRequestError(f'Invalid integer value: {value!r}')

    sign, digits = match.groups()
    digits = digits.lstrip('0') or '0'
    if len(digits) > INT64_MAX_DIGITS:
        raise MalformedRequestError(f'Integer value out of 64-bit range: {value[:32]!r}...')

    number = int(sign + digits)
    if not INT64_MIN <= number <= INT64_MAX:
        raise MalformedRequestError(f'Integer value out of 64-bit range: {value!r}')
    return number
