from zope.interface import Attribute
from zope.interface import Interface


class IObjectBackend(Interface):
    """Byte-level access to one bucket of an S3-compatible object store."""

    bucket_name = Attribute("Name of the bucket all keys live in.")

    def put_object(key, data, content_type):
        """Write the whole payload under key."""

    def get_object(key):
        """Return the full payload stored under key."""

    def list_objects(prefix):
        """Return FileInfo records for keys starting with prefix (one page)."""

    def delete_object(key):
        """Delete the object stored under key."""

    def head_bucket():
        """Check that the bucket exists and is reachable."""


class IStorageClient(Interface):
    """Environment-scoped CSV and image storage."""

    def upload_csv(path, data):
        """Upload CSV bytes under the csv category."""

    def download_csv(path):
        """Download CSV bytes from the csv category."""

    def upload_image(path, data, content_type):
        """Upload image bytes under the images category."""

    def list_csv_files(prefix):
        """List objects under the csv category matching prefix."""

    def remove_file(path, category):
        """Delete one object."""

    def upload_scraped_data(store, filename, data):
        """Upload a scraped CSV for store."""

    def get_latest_scraped_file(store):
        """Return the payload of the most recently modified scraped file."""

    def test_connection():
        """Raise if the configured bucket is not reachable."""
