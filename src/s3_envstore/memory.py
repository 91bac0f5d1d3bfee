from botocore.exceptions import ClientError
from datetime import datetime
from datetime import timezone
from s3_envstore.interfaces import IObjectBackend
from s3_envstore.models import FileInfo
from zope.interface import implementer

import threading


def _utcnow():
    return datetime.now(timezone.utc)


def _not_found(operation, key):
    return ClientError(
        {
            "Error": {
                "Code": "NoSuchKey",
                "Message": "The specified key does not exist.",
                "Key": key,
            },
            "ResponseMetadata": {"HTTPStatusCode": 404},
        },
        operation,
    )


def _bucket_not_found(bucket_name):
    return ClientError(
        {
            "Error": {
                "Code": "404",
                "Message": "Not Found",
                "BucketName": bucket_name,
            },
            "ResponseMetadata": {"HTTPStatusCode": 404},
        },
        "HeadBucket",
    )


@implementer(IObjectBackend)
class InMemoryBackend:
    """Process-local object store with the same surface as Boto3Backend.

    Objects live in a dict keyed by object key. ``clock`` supplies the
    last-modified timestamp for each write. Missing keys raise the same
    ``ClientError`` a real bucket would. With ``reachable=False`` the
    bucket behaves as if it did not exist for ``head_bucket``.
    """

    def __init__(self, bucket_name="default", clock=None, reachable=True):
        self.bucket_name = bucket_name
        self.reachable = reachable
        self._clock = clock or _utcnow
        self._objects = {}  # {key: (data, content_type, last_modified)}
        self._lock = threading.Lock()

    def put_object(self, key, data, content_type):
        with self._lock:
            self._objects[key] = (bytes(data), content_type, self._clock())

    def get_object(self, key):
        with self._lock:
            entry = self._objects.get(key)
        if entry is None:
            raise _not_found("GetObject", key)
        return entry[0]

    def content_type(self, key):
        with self._lock:
            entry = self._objects.get(key)
        if entry is None:
            raise _not_found("HeadObject", key)
        return entry[1]

    def list_objects(self, prefix):
        with self._lock:
            items = sorted(self._objects.items())
        return [
            FileInfo(key=key, size=len(data), last_modified=modified)
            for key, (data, _content_type, modified) in items
            if key.startswith(prefix)
        ]

    def delete_object(self, key):
        # S3 semantics: deleting a missing key succeeds
        with self._lock:
            self._objects.pop(key, None)

    def head_bucket(self):
        if not self.reachable:
            raise _bucket_not_found(self.bucket_name)

    def keys(self):
        with self._lock:
            return sorted(self._objects)
