import json

import pytest
from botocore.client import BaseClient
from botocore.exceptions import EndpointConnectionError, NoCredentialsError
from botocore.stub import Stubber

from s3shortener.constants import DEFAULT_BUCKET_NAME
from s3shortener.models import UrlRecord
from s3shortener.dao.s3 import UrlRecordS3DAO
from s3shortener.dao.exceptions import StorageWriteError, DataStoreError


@pytest.fixture
def record() -> UrlRecord:
    return UrlRecord(original_url='https://example.com', expiration_time=3600)


def test_record_key():
    assert UrlRecordS3DAO.record_key('abc12345') == 'abc12345.json'


def test_insert_puts_json_record(s3_client: BaseClient, record: UrlRecord):
    dao = UrlRecordS3DAO(s3_client=s3_client)

    with Stubber(s3_client) as stubber:
        stubber.add_response(
            'put_object',
            {'ETag': '"fake-etag"'},
            expected_params={
                'Bucket': DEFAULT_BUCKET_NAME,
                'Key': 'abc12345.json',
                'Body': b'{"originalUrl":"https://example.com","expirationTime":3600}',
                'ContentType': 'application/json',
            },
        )
        assert dao.insert(record, shortcode='abc12345') is dao
        stubber.assert_no_pending_responses()


def test_insert_round_trips_record(mock_s3_client: BaseClient, record: UrlRecord):
    UrlRecordS3DAO(s3_client=mock_s3_client).insert(record, shortcode='abc12345')

    mock_s3_client.put_object.assert_called_once()
    kwargs = mock_s3_client.put_object.call_args.kwargs
    assert kwargs['Bucket'] == DEFAULT_BUCKET_NAME
    assert kwargs['Key'] == 'abc12345.json'
    assert json.loads(kwargs['Body']) == {'originalUrl': 'https://example.com', 'expirationTime': 3600}
    assert UrlRecord.from_json(kwargs['Body']) == record


@pytest.mark.parametrize('error_code, http_status', [('AccessDenied', 403), ('NoSuchBucket', 404), ('SlowDown', 503)])
def test_insert_raises_storage_write_error_on_service_error(s3_client: BaseClient, record: UrlRecord, error_code: str, http_status: int):
    dao = UrlRecordS3DAO(s3_client=s3_client)

    with Stubber(s3_client) as stubber:
        stubber.add_client_error('put_object', service_error_code=error_code, http_status_code=http_status)
        with pytest.raises(StorageWriteError, match='Error saving URL data to S3') as exc_info:
            dao.insert(record, shortcode='abc12345')

    assert error_code in str(exc_info.value)
    assert isinstance(exc_info.value, DataStoreError)


@pytest.mark.parametrize(
    'error',
    [
        EndpointConnectionError(endpoint_url='https://s3.us-east-1.amazonaws.com'),
        NoCredentialsError(),
    ],
)
def test_insert_raises_storage_write_error_on_transport_error(mock_s3_client: BaseClient, record: UrlRecord, error: Exception):
    mock_s3_client.put_object.side_effect = error

    with pytest.raises(StorageWriteError, match='Error saving URL data to S3') as exc_info:
        UrlRecordS3DAO(s3_client=mock_s3_client).insert(record, shortcode='abc12345')

    assert exc_info.value.__cause__ is error


def test_insert_type_checks_arguments(mock_s3_client: BaseClient):
    from beartype.roar import BeartypeCallHintParamViolation

    with pytest.raises(BeartypeCallHintParamViolation):
        UrlRecordS3DAO(s3_client=mock_s3_client).insert({'originalUrl': 'https://example.com'}, shortcode='abc12345')

    mock_s3_client.put_object.assert_not_called()
