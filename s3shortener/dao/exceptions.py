"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, permissions, throttling).

    StorageWriteError:
        Raised when a URL record can't be written to the data store.

Example:
    >>> from s3shortener.dao.exceptions import StorageWriteError
    >>> raise StorageWriteError("Error saving URL data to S3: Access Denied")
    Traceback (most recent call last):
        ...
    s3shortener.dao.exceptions.StorageWriteError: Error saving URL data to S3: Access Denied
"""

from s3shortener.exceptions import ShortenerError


class DAOError(ShortenerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, permissions, throttling, etc.
    """

    error_code = 'dao:data_store_error'


class StorageWriteError(DataStoreError):
    """Exception raised when a URL record can't be written to the data store."""

    error_code = 'dao:storage_write_error'
