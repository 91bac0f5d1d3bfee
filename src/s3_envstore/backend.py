from botocore.config import Config
from botocore.exceptions import BotoCoreError
from botocore.exceptions import ClientError
from s3_envstore.interfaces import IObjectBackend
from s3_envstore.models import FileInfo
from zope.interface import implementer

import boto3
import contextlib
import logging


logger = logging.getLogger(__name__)


@implementer(IObjectBackend)
class Boto3Backend:
    """Thin boto3 wrapper for one bucket of S3-compatible object storage.

    Every method is a single request. Backend errors are logged at DEBUG
    and re-raised unchanged.
    """

    def __init__(
        self,
        bucket_name,
        endpoint_url=None,
        region_name=None,
        aws_access_key_id=None,
        aws_secret_access_key=None,
        connect_timeout=60,
        read_timeout=60,
    ):
        self.bucket_name = bucket_name
        # Custom endpoints (R2, MinIO) don't support virtual-hosted buckets
        addressing_style = "path" if endpoint_url else "auto"

        config = Config(
            s3={"addressing_style": addressing_style},
            connect_timeout=connect_timeout,
            read_timeout=read_timeout,
        )

        kwargs = {"config": config}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        if region_name:
            kwargs["region_name"] = region_name
        # Static credentials, even empty ones, bypass the ambient AWS chain
        if aws_access_key_id is not None:
            kwargs["aws_access_key_id"] = aws_access_key_id
        if aws_secret_access_key is not None:
            kwargs["aws_secret_access_key"] = aws_secret_access_key

        self._client = boto3.client("s3", **kwargs)
        logger.info(
            "S3 backend for bucket=%s endpoint=%s addressing=%s",
            bucket_name,
            endpoint_url or "<aws>",
            addressing_style,
        )

    @classmethod
    def from_config(cls, config):
        return cls(
            bucket_name=config.bucket_name,
            endpoint_url=config.endpoint or None,
            region_name=config.region,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    def _log_failure(self, e, operation, key):
        logger.debug(
            "S3 %s failed for bucket=%s key=%s: %s",
            operation,
            self.bucket_name,
            key,
            e,
        )

    def put_object(self, key, data, content_type):
        try:
            self._client.put_object(
                Bucket=self.bucket_name,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (ClientError, BotoCoreError) as e:
            self._log_failure(e, "put", key)
            raise

    def get_object(self, key):
        try:
            response = self._client.get_object(Bucket=self.bucket_name, Key=key)
            with contextlib.closing(response["Body"]) as body:
                return body.read()
        except (ClientError, BotoCoreError) as e:
            self._log_failure(e, "get", key)
            raise

    def list_objects(self, prefix):
        # Single request: at most one page (1000 keys on AWS) is returned
        try:
            response = self._client.list_objects_v2(
                Bucket=self.bucket_name, Prefix=prefix
            )
        except (ClientError, BotoCoreError) as e:
            self._log_failure(e, "list", prefix)
            raise
        return [
            FileInfo(
                key=obj["Key"],
                size=obj["Size"],
                last_modified=obj["LastModified"],
            )
            for obj in response.get("Contents", [])
        ]

    def delete_object(self, key):
        try:
            self._client.delete_object(Bucket=self.bucket_name, Key=key)
        except (ClientError, BotoCoreError) as e:
            self._log_failure(e, "delete", key)
            raise

    def head_bucket(self):
        try:
            self._client.head_bucket(Bucket=self.bucket_name)
        except (ClientError, BotoCoreError) as e:
            self._log_failure(e, "head-bucket", "")
            raise
