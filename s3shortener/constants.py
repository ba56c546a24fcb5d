from enum import StrEnum


# S3 bucket holding every URL record (one JSON object per short code)
DEFAULT_BUCKET_NAME = 'miranda-ale-url-shortener'

# Short code length (prefix of a canonical UUID4 string)
SHORTCODE_LENGTH = 8

# Signed 64-bit bounds for expiration times (in seconds)
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


DEFAULT_LOCALSTACK_ENDPOINT = 'http://localhost:4566'
