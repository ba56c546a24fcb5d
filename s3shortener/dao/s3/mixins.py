"""S3 mixin providing shared client initialization.

Responsibilities:
    - Build (once per process) the boto3 S3 client, AWS/LocalStack aware
    - Inject the S3 client and target bucket into S3-backed DAOs

Classes:
    - S3ClientMixin: Base mixin to inject an S3 client and bucket name.

Functions:
    - default_s3_client: Process-wide S3 client, created on first use.

Example:
    Typical usage with a DAO implementation:

        >>> class UrlRecordS3DAO(S3ClientMixin):
        ...     pass
        ...
        >>> dao = UrlRecordS3DAO()
        >>> dao.bucket
        'miranda-ale-url-shortener'
"""

import functools

import boto3

from s3shortener.types import S3Client
from s3shortener.constants import DEFAULT_BUCKET_NAME
from s3shortener.utils.config import s3_client_kwargs


@functools.cache
def default_s3_client() -> S3Client:
    """Return the process-wide S3 client

    The client is created on the first call and reused by every later
    invocation handled by the same Lambda execution environment.
    """
    return boto3.client('s3', **s3_client_kwargs())


class S3ClientMixin:
    """Mixin S3 client setup for S3-backed DAOs.

    Attributes:
        s3 (S3Client):
            boto3 S3 client used by subclasses.

        bucket (str):
            Name of the S3 bucket holding every object written by the DAO.
            Fixed to DEFAULT_BUCKET_NAME.
    """

    bucket = DEFAULT_BUCKET_NAME

    def __init__(self, s3_client: S3Client | None = None):
        """Initialize an S3-based DAO

        Args:
            s3_client (S3Client | None):
                Pre-initialized boto3 S3 client. If None, the process-wide
                client from default_s3_client() is used.
        """
        self.s3 = s3_client if s3_client is not None else default_s3_client()
