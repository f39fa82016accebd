"""Resolve an S3 path into a client bound to the bucket's region."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from botocore.exceptions import BotoCoreError, ClientError

from pathio._errors import RegionLookupFailed
from pathio._path import parse_s3_path

if TYPE_CHECKING:
    from collections.abc import Callable

log = logging.getLogger(__name__)

# "US Standard" buckets report an empty location constraint.
DEFAULT_REGION = "us-east-1"


@dataclasses.dataclass(frozen=True)
class S3Connection:
    """A client handle bound to one bucket/key, valid for a single operation.

    :param handler: boto3 S3 client bound to ``region``.
    :param bucket: Bucket name.
    :param key: Object key (or listing prefix).
    :param region: Region the handler is bound to.
    """

    handler: Any
    bucket: str
    key: str
    region: str


def get_region_for_bucket(handler: Any, bucket: str) -> str:
    """Look up the region of ``bucket``.

    Any region works for this call as long as ``handler`` uses path-style
    addressing.

    :raises RegionLookupFailed: If the SDK call fails.
    """
    try:
        resp = handler.get_bucket_location(Bucket=bucket)
    except (BotoCoreError, ClientError) as exc:
        raise RegionLookupFailed(
            f"Failed to get location for bucket '{bucket}', {exc}",
            backend="s3",
            bucket=bucket,
        ) from exc
    region = resp.get("LocationConstraint")
    if not region:
        return DEFAULT_REGION
    return str(region)


def resolve_connection(
    path: str,
    *,
    client_factory: Callable[[str], Any],
    region: str = "",
    allow_empty_key: bool = False,
) -> S3Connection:
    """Build a fresh :class:`S3Connection` for ``path``.

    :param client_factory: Returns a path-style S3 client for a region name.
    :param region: Region override. Empty triggers a bucket location lookup.
    :param allow_empty_key: Accept ``s3://bucket/`` (listing the bucket root).
    :raises InvalidPath: If ``path`` has no bucket or key.
    :raises RegionLookupFailed: If the bucket location lookup fails.
    """
    bucket, key = parse_s3_path(path, allow_empty_key=allow_empty_key)
    if not region:
        region = get_region_for_bucket(client_factory(DEFAULT_REGION), bucket)
        log.debug("Resolved region %s for bucket %s", region, bucket)
    return S3Connection(handler=client_factory(region), bucket=bucket, key=key, region=region)
