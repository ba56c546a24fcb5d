from s3shortener.utils.config import app_env, localstack_endpoint, s3_client_kwargs
from s3shortener.utils.helpers import request_body, parse_json_object, parse_int64
from s3shortener.utils.shortener import generate_shortcode
from s3shortener.utils.runtime import running_locally
from s3shortener.utils.logging import initialize_logging


__all__ = [
    'generate_shortcode',
    'app_env',
    'localstack_endpoint',
    's3_client_kwargs',
    'request_body',
    'parse_json_object',
    'parse_int64',
    'running_locally',
    'initialize_logging',
]
