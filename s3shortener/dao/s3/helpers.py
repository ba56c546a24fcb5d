import functools
from typing import TypeVar, Any
from collections.abc import Callable

from botocore.exceptions import BotoCoreError, ClientError

from s3shortener.dao.exceptions import StorageWriteError


__all__ = []

F = TypeVar('F', bound=Callable[..., Any])


def handle_s3_write_error[F](method: F) -> F:
    """Wrap S3-writing DAO methods to handle boto3 errors

    Both service errors (ClientError: AccessDenied, NoSuchBucket, SlowDown, ...)
    and transport errors (BotoCoreError: EndpointConnectionError, ReadTimeoutError, ...)
    are translated into StorageWriteError, keeping the original error as __cause__.

    Args:
        method (Callable[..., Any]):
            DAO method performing S3 writes which may raise ClientError or BotoCoreError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises StorageWriteError when the write fails.

    Example:
        >>> @handle_s3_write_error
        ... def insert(self, record, shortcode):
        ...     self.s3.put_object(Bucket=self.bucket, Key=f'{shortcode}.json', Body=record.to_json())
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except (ClientError, BotoCoreError) as e:
            raise StorageWriteError(f'Error saving URL data to S3: {e}') from e

    return wrapper
