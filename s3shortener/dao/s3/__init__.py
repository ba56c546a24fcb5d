from s3shortener.dao.s3.mixins import S3ClientMixin, default_s3_client
from s3shortener.dao.s3.url_record_s3_dao import UrlRecordS3DAO


__all__ = [
    'S3ClientMixin',
    'UrlRecordS3DAO',
    'default_s3_client',
]
