from s3_envstore.backend import Boto3Backend
from s3_envstore.interfaces import IStorageClient
from s3_envstore.keys import build_key
from s3_envstore.models import Category
from s3_envstore.models import Environment
from zope.interface import implementer

import logging


logger = logging.getLogger(__name__)

CSV_CONTENT_TYPE = "text/csv"
SCRAPED_DIR = "scraped"


class NoFilesFoundError(LookupError):
    """No scraped files exist for a store."""

    def __init__(self, store, prefix):
        super().__init__(f"no files found for store {store!r} under {prefix}")
        self.store = store
        self.prefix = prefix


@implementer(IStorageClient)
class StorageClient:
    """Environment-scoped CSV and image storage on top of an object backend.

    Keys look like ``<env>/[dev-<user>/]<category>/<path>``. The dev-user
    segment is only used in the development environment, so developers
    sharing a bucket don't overwrite each other's data.
    """

    def __init__(self, backend, environment, dev_user=""):
        self._backend = backend
        self.environment = environment
        self.dev_user = dev_user or ""

    @classmethod
    def from_config(cls, config, environment=Environment.DEVELOPMENT, dev_user=""):
        return cls(Boto3Backend.from_config(config), environment, dev_user)

    def __repr__(self):
        return (
            f"<StorageClient env={self.environment.value} "
            f"dev_user={self.dev_user!r} backend={self._backend!r}>"
        )

    def build_key(self, category, path):
        return build_key(self.environment, category, path, self.dev_user)

    # -- CSV --

    def upload_csv(self, path, data):
        key = self.build_key(Category.CSV, path)
        logger.debug("Uploading %d bytes to %s", len(data), key)
        self._backend.put_object(key, data, CSV_CONTENT_TYPE)

    def download_csv(self, path):
        key = self.build_key(Category.CSV, path)
        logger.debug("Downloading %s", key)
        return self._backend.get_object(key)

    def list_csv_files(self, prefix=""):
        key_prefix = self.build_key(Category.CSV, prefix)
        logger.debug("Listing %s", key_prefix)
        return self._backend.list_objects(key_prefix)

    # -- Images --

    def upload_image(self, path, data, content_type):
        key = self.build_key(Category.IMAGES, path)
        logger.debug("Uploading %d bytes (%s) to %s", len(data), content_type, key)
        self._backend.put_object(key, data, content_type)

    def remove_file(self, path, category=Category.CSV):
        key = self.build_key(category, path)
        logger.debug("Deleting %s", key)
        self._backend.delete_object(key)

    # -- Scraped data --

    def upload_scraped_data(self, store, filename, data):
        self.upload_csv(f"{SCRAPED_DIR}/{store}/{filename}", data)

    def get_latest_scraped_file(self, store):
        """Download the scraped file for store with the newest timestamp.

        Equal timestamps are resolved by the greater key. Backends that
        truncate LastModified to seconds make same-second uploads compare
        by key only.
        """
        # Trailing slash keeps store "a" from matching store "ab"
        prefix = f"{SCRAPED_DIR}/{store}/"
        files = self.list_csv_files(prefix)
        if not files:
            raise NoFilesFoundError(store, self.build_key(Category.CSV, prefix))
        latest = max(files, key=lambda info: (info.last_modified, info.key))
        logger.debug("Latest scraped file for %s is %s", store, latest.key)
        return self._backend.get_object(latest.key)

    def test_connection(self):
        logger.debug("HEAD bucket %s", self._backend.bucket_name)
        self._backend.head_bucket()
