"""Data Access Object (DAO) implementation for persisting URL records in S3

This module provides an S3-based DAO writing UrlRecord instances as JSON
objects, one object per short code.

Responsibilities:
    - Serialize UrlRecord instances to JSON;
    - Write them to the fixed S3 bucket under `<shortcode>.json`;
    - Raise appropriate DAO exceptions when the write fails.

Classes:
    UrlRecordS3DAO:
        DAO for storing UrlRecord instances in an S3 bucket.

Example:
    >>> from s3shortener.models import UrlRecord
    >>> from s3shortener.dao.s3 import UrlRecordS3DAO

    >>> dao = UrlRecordS3DAO()

    >>> record = UrlRecord(original_url='https://example.com/page', expiration_time=3600)
    >>> dao.insert(record, shortcode='1b9d6bcd')
    <UrlRecordS3DAO>

    >>> dao.record_key('1b9d6bcd')
    '1b9d6bcd.json'
"""

import logging

from beartype import beartype

from s3shortener.models import UrlRecord
from s3shortener.dao.s3.mixins import S3ClientMixin
from s3shortener.dao.s3.helpers import handle_s3_write_error


logger = logging.getLogger(__name__)


class UrlRecordS3DAO(S3ClientMixin):
    """S3-based Data Access Object (DAO) for URL records

    Attributes (see S3ClientMixin):
        s3 (S3Client):
            boto3 S3 client used to communicate with S3.
        bucket (str):
            Target bucket name.

    Methods:
        insert(record: UrlRecord, shortcode: str) -> UrlRecordS3DAO:
            Write a URL record under `<shortcode>.json`.
            Overwrites any object already stored under that key.
            Raises StorageWriteError when the write fails.

        record_key(shortcode: str) -> str:
            Return the S3 object key for a short code.
    """

    CONTENT_TYPE = 'application/json'

    @staticmethod
    def record_key(shortcode: str) -> str:
        return f'{shortcode}.json'

    @handle_s3_write_error
    @beartype
    def insert(self, record: UrlRecord, shortcode: str) -> 'UrlRecordS3DAO':
        """Write a URL record to S3

        The write is an unconditional PutObject: an existing object under the
        same key is replaced. No read happens before the write.

        Args:
            record (UrlRecord):
                The URL record to persist.
            shortcode (str):
                Short code naming the object (`<shortcode>.json`).

        Returns:
            UrlRecordS3DAO: self (for method chaining)

        Raises:
            StorageWriteError:
                If S3 rejects the write or can't be reached.

        Example:
            >>> dao.insert(UrlRecord(original_url='https://example.com', expiration_time=60), shortcode='abc12345')
            <UrlRecordS3DAO>
        """
        key = self.record_key(shortcode)
        self.s3.put_object(
            Bucket=self.bucket,
            Key=key,
            Body=record.to_json().encode('utf-8'),
            ContentType=self.CONTENT_TYPE,
        )
        logger.debug('Wrote URL record to S3.', extra={'bucket': self.bucket, 'key': key})
        return self
