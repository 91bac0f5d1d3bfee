from dataclasses import dataclass
from s3_envstore.models import Environment

import os


DEFAULT_BUCKET_NAME = "default"
DEFAULT_REGION = "auto"


@dataclass(frozen=True)
class StorageClientConfig:
    """Connection settings for an S3-compatible backend.

    An empty ``endpoint`` means the public AWS endpoints with the default
    addressing. A custom endpoint (R2, MinIO, ...) switches to path-style
    addressing.
    """

    access_key_id: str = ""
    secret_access_key: str = ""
    bucket_name: str = DEFAULT_BUCKET_NAME
    region: str = DEFAULT_REGION
    endpoint: str = ""

    @property
    def uses_path_style(self):
        return bool(self.endpoint)


def _get(environ, name, default=""):
    # empty values count as unset
    return environ.get(name) or default


def load_config_from_env(environ=None, prefix="S3_"):
    """Build a StorageClientConfig from ``<prefix>*`` variables.

    Reads ACCESS_KEY_ID, SECRET_ACCESS_KEY, BUCKET_NAME, REGION and ENDPOINT.
    Missing bucket and region fall back to defaults; never raises.
    """
    if environ is None:
        environ = os.environ
    return StorageClientConfig(
        access_key_id=_get(environ, f"{prefix}ACCESS_KEY_ID"),
        secret_access_key=_get(environ, f"{prefix}SECRET_ACCESS_KEY"),
        bucket_name=_get(environ, f"{prefix}BUCKET_NAME", DEFAULT_BUCKET_NAME),
        region=_get(environ, f"{prefix}REGION", DEFAULT_REGION),
        endpoint=_get(environ, f"{prefix}ENDPOINT"),
    )


def load_r2_config_from_env(environ=None):
    """Legacy Cloudflare R2 variable names (``R2_*``)."""
    return load_config_from_env(environ, prefix="R2_")


def load_environment_from_env(environ=None, default=Environment.DEVELOPMENT):
    if environ is None:
        environ = os.environ
    value = _get(environ, "APP_ENV")
    if not value:
        return default
    return Environment.parse(value)


def load_dev_user_from_env(environ=None):
    if environ is None:
        environ = os.environ
    return _get(environ, "DEV_USER").strip()
