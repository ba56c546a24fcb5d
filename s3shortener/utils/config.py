"""Utility functions for application configuration management.

Configuration is read from the Lambda's environment. The only external
resource the function talks to is S3; everything it needs to reach S3 is
resolved here:

    - In AWS, boto3 resolves region and credentials from the Lambda
      execution environment (no extra configuration needed).
    - When running locally (`APP_ENV=local` or under SAM), the S3 client is
      pointed at LocalStack via `LOCALSTACK_ENDPOINT`.

The S3 bucket name is NOT configurable (see `DEFAULT_BUCKET_NAME`).

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    localstack_endpoint() -> str
        Return the validated LocalStack endpoint URL.

    s3_client_kwargs() -> dict
        Return keyword arguments for `boto3.client('s3', ...)`.

Example:
    >>> from s3shortener.utils.config import s3_client_kwargs
    >>> os.environ['APP_ENV'] = 'local'
    >>> s3_client_kwargs()
    {'endpoint_url': 'http://localhost:4566'}
"""

import os
import urllib.parse
import logging
from typing import Any

from s3shortener.constants import ENV, DEFAULT_LOCALSTACK_ENDPOINT
from s3shortener.exceptions import BadConfigurationError
from s3shortener.utils.runtime import running_locally


logger = logging.getLogger(__name__)


def app_env() -> str:
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def localstack_endpoint() -> str:
    """Return the LocalStack endpoint URL from `LOCALSTACK_ENDPOINT`.

    Only http(s) URLs with a host are accepted.

    Raises:
        BadConfigurationError:
            If the configured endpoint is not a valid http(s) URL.
    """
    url = os.environ.get(ENV.LocalStack.ENDPOINT) or DEFAULT_LOCALSTACK_ENDPOINT
    components = urllib.parse.urlparse(url)
    if components.scheme not in {'http', 'https'}:
        raise BadConfigurationError(f'Bad scheme {url}')
    if not components.hostname:
        raise BadConfigurationError(f'Bad host {url}')
    return url


def s3_client_kwargs() -> dict[str, Any]:
    """Return keyword arguments for the boto3 S3 client.

    Returns:
        dict: `{'endpoint_url': <LocalStack URL>}` when running locally,
              an empty dict otherwise.
    """
    if not running_locally():
        return {}

    endpoint_url = localstack_endpoint()
    logger.debug('Using LocalStack S3 endpoint.', extra={'endpointUrl': endpoint_url, 'appEnv': app_env()})
    return {'endpoint_url': endpoint_url}
