"""S3 object storage backend using boto3."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, BinaryIO

from botocore.exceptions import ClientError

from pathio._backend import Backend
from pathio._config import AES256, ClientConfig
from pathio.backends._s3_connection import S3Connection, resolve_connection

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

log = logging.getLogger(__name__)

_NOT_FOUND_CODES = frozenset({"404", "NoSuchKey", "NotFound"})


def is_not_found(exc: ClientError) -> bool:
    """Return whether a botocore ``ClientError`` is S3's not-found signal."""
    code = exc.response.get("Error", {}).get("Code", "")
    return str(code) in _NOT_FOUND_CODES


def merge_listing(pages: Iterable[dict[str, Any]]) -> list[str]:
    """Flatten ``list_objects_v2`` pages into one ordered list of names.

    Each page contributes its common prefixes, then its object keys. A page
    whose first common prefix repeats the last one already collected (a
    pagination boundary artifact) has that entry dropped.
    """
    results: list[str] = []
    last_prefix: str | None = None
    for page in pages:
        prefixes = [p["Prefix"] for p in page.get("CommonPrefixes") or []]
        if prefixes and last_prefix is not None and prefixes[0] == last_prefix:
            prefixes = prefixes[1:]
        if prefixes:
            last_prefix = prefixes[-1]
        results.extend(prefixes)
        results.extend(obj["Key"] for obj in page.get("Contents") or [])
    return results


class S3Backend(Backend):
    """S3 backend that resolves a fresh connection for every operation.

    No connection, client or region is cached between calls. SDK errors
    propagate unwrapped, except in :meth:`exists` where not-found becomes
    ``False``.

    :param config: Client configuration (region, encryption, transport).
    :param client_factory: Builds an S3 client for a region name. Defaults to
        a path-style boto3 client derived from ``config``.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._client_factory = client_factory or self._make_client

    @property
    def name(self) -> str:
        return "s3"

    def __repr__(self) -> str:
        return f"S3Backend(region={self._config.region!r}, disable_encryption={self._config.disable_encryption!r})"

    # region: connection

    def _make_client(self, region: str) -> Any:
        """Create a boto3 S3 client bound to ``region`` with path-style addressing."""
        import boto3
        from botocore.config import Config

        cfg = self._config
        session = cfg.session or boto3.session.Session(profile_name=cfg.profile_name)
        base = cfg.botocore_config or Config()
        s3_opts = dict(base.s3 or {})
        s3_opts["addressing_style"] = "path"
        return session.client("s3", region_name=region, config=base.merge(Config(s3=s3_opts)), **cfg.client_options)

    def connection_information(self, path: str, *, allow_empty_key: bool = False) -> S3Connection:
        """Resolve ``path`` into a client bound to its bucket's region."""
        return resolve_connection(
            path,
            client_factory=self._client_factory,
            region=self._config.region,
            allow_empty_key=allow_empty_key,
        )

    # endregion

    # region: operations

    def read(self, path: str) -> BinaryIO:
        conn = self.connection_information(path)
        log.debug("GetObject s3://%s/%s", conn.bucket, conn.key)
        resp = conn.handler.get_object(Bucket=conn.bucket, Key=conn.key)
        return resp["Body"]  # type: ignore[no-any-return]

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        conn = self.connection_information(path)
        params: dict[str, Any] = {"Bucket": conn.bucket, "Key": conn.key, "Body": stream}
        if not self._config.disable_encryption:
            params["ServerSideEncryption"] = AES256
        if self._config.storage_class:
            params["StorageClass"] = self._config.storage_class
        log.debug("PutObject s3://%s/%s", conn.bucket, conn.key)
        conn.handler.put_object(**params)

    def delete(self, path: str) -> None:
        conn = self.connection_information(path)
        log.debug("DeleteObject s3://%s/%s", conn.bucket, conn.key)
        conn.handler.delete_object(Bucket=conn.bucket, Key=conn.key)

    def exists(self, path: str) -> bool:
        conn = self.connection_information(path)
        log.debug("HeadObject s3://%s/%s", conn.bucket, conn.key)
        try:
            conn.handler.head_object(Bucket=conn.bucket, Key=conn.key)
        except ClientError as exc:
            if is_not_found(exc):
                return False
            raise
        return True

    def list_files(self, path: str) -> list[str]:
        conn = self.connection_information(path, allow_empty_key=True)
        log.debug("ListObjectsV2 s3://%s/%s", conn.bucket, conn.key)
        paginator = conn.handler.get_paginator("list_objects_v2")
        pages = paginator.paginate(Bucket=conn.bucket, Prefix=conn.key, Delimiter="/")
        return merge_listing(pages)

    # endregion
