"""Client — routes each operation to the local or S3 backend by path."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, BinaryIO

from pathio._backend import Pathio, rewind
from pathio._config import ClientConfig
from pathio._path import PathKind, classify
from pathio.backends._local import LocalBackend
from pathio.backends._s3 import S3Backend

if TYPE_CHECKING:
    from pathio._backend import Backend


class Client(Pathio):
    """Reads and writes local paths and ``s3://bucket/key`` paths alike.

    The configuration is fixed at construction and only affects S3 paths.

    :param config: Optional S3 configuration.
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config or ClientConfig()
        self._local = LocalBackend()
        self._s3 = S3Backend(self._config)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def __repr__(self) -> str:
        return f"Client(config={self._config!r})"

    def _backend(self, path: str) -> Backend:
        if classify(path) is PathKind.S3:
            return self._s3
        return self._local

    def read(self, path: str) -> BinaryIO:
        """Open ``path`` for reading.

        The caller owns the returned stream and must close it. A missing local
        file raises ``FileNotFoundError``; a missing S3 object raises the
        botocore ``ClientError``.
        """
        return self._backend(path).read(path)

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        """Write ``stream`` to ``path`` from its first byte.

        :raises SeekFailed: If ``stream`` cannot be rewound to offset 0.
        """
        rewind(stream, path)
        self._backend(path).write_stream(path, stream)

    def delete(self, path: str) -> None:
        self._backend(path).delete(path)

    def list_files(self, path: str) -> list[str]:
        """List entries directly under ``path``.

        Local paths yield bare names. S3 paths yield full keys and common
        prefixes (``dir/``), prefixes before keys within each listing page.
        """
        return self._backend(path).list_files(path)

    def exists(self, path: str) -> bool:
        """Check existence. S3 existence is only eventually consistent."""
        return self._backend(path).exists(path)


@functools.lru_cache(maxsize=None)
def default_client() -> Client:
    """Process-wide client with encryption enabled and no region override."""
    return Client()


def read(path: str) -> BinaryIO:
    """Call :meth:`Client.read` on the default client."""
    return default_client().read(path)


def write(path: str, data: bytes) -> None:
    """Call :meth:`Client.write` on the default client."""
    default_client().write(path, data)


def write_stream(path: str, stream: BinaryIO) -> None:
    """Call :meth:`Client.write_stream` on the default client."""
    default_client().write_stream(path, stream)


def delete(path: str) -> None:
    """Call :meth:`Client.delete` on the default client."""
    default_client().delete(path)


def list_files(path: str) -> list[str]:
    """Call :meth:`Client.list_files` on the default client."""
    return default_client().list_files(path)


def exists(path: str) -> bool:
    """Call :meth:`Client.exists` on the default client."""
    return default_client().exists(path)
