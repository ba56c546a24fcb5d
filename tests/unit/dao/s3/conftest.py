from unittest.mock import MagicMock

import boto3
import pytest
from botocore.client import BaseClient

from s3shortener.dao.s3 import mixins


@pytest.fixture
def s3_client() -> BaseClient:
    """Real boto3 S3 client with dummy credentials (use with botocore Stubber)."""
    return boto3.client(
        's3',
        region_name='us-east-1',
        aws_access_key_id='testing',
        aws_secret_access_key='testing',  # noqa: S106
    )


@pytest.fixture
def mock_s3_client() -> BaseClient:
    """Mock S3 client recording put_object calls."""
    client = MagicMock(spec=BaseClient)
    client.put_object = MagicMock(return_value={'ETag': '"fake-etag"'})
    return client


@pytest.fixture(autouse=True)
def _clear_default_s3_client():
    mixins.default_s3_client.cache_clear()
    yield
    mixins.default_s3_client.cache_clear()
