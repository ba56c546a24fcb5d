from typing import Any

from botocore.client import BaseClient


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type ShortenResponse = dict[str, str]
type RequestBody = dict[str, Any]

# Type aliases for boto3 clients
type S3Client = BaseClient
