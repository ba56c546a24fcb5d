import logging

from s3shortener.types import LambdaEvent, LambdaContext, RequestBody, ShortenResponse
from s3shortener.models import UrlRecord
from s3shortener.dao.s3 import UrlRecordS3DAO
from s3shortener.dao.exceptions import StorageWriteError
from s3shortener.exceptions import MalformedRequestError
from s3shortener.utils import generate_shortcode, request_body, parse_json_object, parse_int64
from s3shortener.lambdas.shorten_url.constants import (
    SHORTEN_SUCCESS,
    MALFORMED_REQUEST,
    STORAGE_WRITE_FAILED,
    ORIGINAL_URL_FIELD,
    EXPIRATION_TIME_FIELD,
)


logger = logging.getLogger(__name__)


def required_string(payload: RequestBody, field: str) -> str:
    value = payload.get(field)
    if value is None:
        raise MalformedRequestError(f"Error parsing JSON body: missing '{field}'")
    if not isinstance(value, str):
        raise MalformedRequestError(f"Error parsing JSON body: '{field}' must be a string (given type: {type(value).__name__})")
    return value


def parse_url_record(event: LambdaEvent) -> UrlRecord:
    """Build a UrlRecord from the Lambda event's JSON body

    Raises:
        MalformedRequestError:
            If the body is missing, isn't a JSON object, lacks 'originalUrl' or
            'expirationTime' (both strings), or 'expirationTime' isn't a 64-bit integer.
    """
    payload = parse_json_object(request_body(event))
    original_url = required_string(payload, ORIGINAL_URL_FIELD)
    expiration_time = parse_int64(required_string(payload, EXPIRATION_TIME_FIELD))
    return UrlRecord(original_url=original_url, expiration_time=expiration_time)


def lambda_handler(event: LambdaEvent, context: LambdaContext) -> ShortenResponse:
    """Handle incoming requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Parse original URL and expiration time from request body
    - Step 2: Generate shortcode for new link
    - Step 3: Store URL record in S3 under `<shortcode>.json` (via DAO)
    - Step 4: Respond with the shortcode

    Every failure aborts the invocation: the exception propagates to the Lambda
    runtime, which reports the invocation as failed. Nothing is retried.

    Args:
        event (LambdaEvent):
            Lambda event with a JSON `body`:
            {"originalUrl": "<url>", "expirationTime": "<seconds>"}
        context (LambdaContext):
            AWS Lambda context object (not used directly).

    Returns:
        ShortenResponse:
            {"code": "<8-character shortcode>"}

    Raises:
        MalformedRequestError:
            If the request body can't be parsed (nothing is written to S3).
        StorageWriteError:
            If the URL record can't be written to S3.

    Example:
        >>> event = {'body': '{"originalUrl": "https://example.com", "expirationTime": "3600"}'}
        >>> lambda_handler(event, None)
        {'code': '1b9d6bcd'}
    """
    # 1- Parse URL record from request body
    try:
        url_record = parse_url_record(event)
    except MalformedRequestError as error:
        logger.info(
            'Malformed request body. Aborting invocation.',
            extra={'event': MALFORMED_REQUEST, 'errorCode': error.error_code, 'reason': str(error)},
        )
        raise

    # 2- Generate shortcode for the new link
    shortcode = generate_shortcode()

    # 3- Store URL record in S3 (via DAO)
    try:
        UrlRecordS3DAO().insert(url_record, shortcode=shortcode)
    except StorageWriteError as error:
        logger.exception(
            'Failed to store URL record. Aborting invocation.',
            extra={'event': STORAGE_WRITE_FAILED, 'errorCode': error.error_code, 'shortcode': shortcode, 'reason': str(error)},
        )
        raise

    # 4- Respond with the shortcode
    logger.info(
        'Shortened %s to %s.',
        url_record.original_url,
        shortcode,
        extra={'event': SHORTEN_SUCCESS, 'shortcode': shortcode, 'expirationTime': url_record.expiration_time},
    )
    return {'code': shortcode}
