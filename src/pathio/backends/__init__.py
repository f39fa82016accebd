"""Backend implementations."""

from pathio.backends._local import LocalBackend
from pathio.backends._s3 import S3Backend
from pathio.backends._s3_connection import S3Connection, get_region_for_bucket, resolve_connection

__all__ = ["LocalBackend", "S3Backend", "S3Connection", "get_region_for_bucket", "resolve_connection"]
