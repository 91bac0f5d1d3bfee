from s3_envstore.client import NoFilesFoundError
from s3_envstore.client import StorageClient
from s3_envstore.config import StorageClientConfig
from s3_envstore.models import Category
from s3_envstore.models import Environment
from s3_envstore.models import FileInfo


__all__ = [
    "Category",
    "Environment",
    "FileInfo",
    "NoFilesFoundError",
    "StorageClient",
    "StorageClientConfig",
]
