"""Path classification and S3 path parsing."""

from __future__ import annotations

import enum
from typing import Final

from pathio._errors import InvalidPath

S3_SCHEME: Final = "s3://"


class PathKind(enum.Enum):
    """Which backend services a path."""

    LOCAL = "local"
    S3 = "s3"


def classify(path: str) -> PathKind:
    """Return the backend kind for ``path`` based on its prefix alone.

    Local paths are not normalized; the filesystem decides what they mean.
    """
    if path.startswith(S3_SCHEME):
        return PathKind.S3
    return PathKind.LOCAL


def parse_s3_path(path: str, *, allow_empty_key: bool = False) -> tuple[str, str]:
    """Split ``s3://bucket/key`` into ``(bucket, key)``.

    The key is everything after the third slash and may itself contain
    slashes.

    :param allow_empty_key: Accept ``s3://bucket/`` (used for listing a
        bucket root).
    :raises InvalidPath: If the path has no bucket or no key.
    """
    parts = path.split("/", 3)
    if len(parts) < 4:
        raise InvalidPath(f"Invalid s3 path {path}", path=path, backend="s3")
    bucket, key = parts[2], parts[3]
    if not bucket:
        raise InvalidPath(f"Invalid s3 path {path}: empty bucket", path=path, backend="s3")
    if not key and not allow_empty_key:
        raise InvalidPath(f"Invalid s3 path {path}: empty key", path=path, backend="s3")
    return bucket, key
