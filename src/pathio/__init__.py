"""Read and write local files and S3 objects through one path-based API."""

from pathio._backend import Backend, Pathio
from pathio._client import (
    Client,
    default_client,
    delete,
    exists,
    list_files,
    read,
    write,
    write_stream,
)
from pathio._config import AES256, INTELLIGENT_TIERING, ClientConfig
from pathio._errors import InvalidPath, PathioError, RegionLookupFailed, SeekFailed
from pathio._mock import MockClient
from pathio._path import PathKind, classify, parse_s3_path
from pathio.backends._s3_connection import DEFAULT_REGION

__version__ = "0.1.0"

__all__ = [
    # Core
    "Client",
    "Pathio",
    "Backend",
    "MockClient",
    # Default client
    "default_client",
    "read",
    "write",
    "write_stream",
    "delete",
    "list_files",
    "exists",
    # Paths
    "PathKind",
    "classify",
    "parse_s3_path",
    # Config
    "ClientConfig",
    "AES256",
    "INTELLIGENT_TIERING",
    "DEFAULT_REGION",
    # Errors
    "PathioError",
    "InvalidPath",
    "SeekFailed",
    "RegionLookupFailed",
    # Version
    "__version__",
]
