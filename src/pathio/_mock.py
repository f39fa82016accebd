"""MockClient — an in-memory stand-in for :class:`~pathio.Client` in tests."""

from __future__ import annotations

import dataclasses
import io
import threading
from typing import BinaryIO, Optional

from pathio._backend import Pathio, rewind


@dataclasses.dataclass
class MockClient(Pathio):
    """Mocks a bucket with a ``path -> bytes`` mapping.

    When one of the error attributes is set, the matching method raises it
    without touching ``filesystem``. Like :class:`~pathio.Client`,
    :meth:`write_stream` rewinds its input to offset 0 first.

    :param filesystem: The stored content, keyed by full path.
    :param read_error: Raised by :meth:`read` when set.
    :param write_error: Raised by :meth:`write` when set.
    :param write_stream_error: Raised by :meth:`write_stream` when set.
    """

    filesystem: dict[str, bytes] = dataclasses.field(default_factory=dict)
    read_error: Optional[Exception] = None
    write_error: Optional[Exception] = None
    write_stream_error: Optional[Exception] = None
    _lock: threading.Lock = dataclasses.field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def read(self, path: str) -> BinaryIO:
        if self.read_error is not None:
            raise self.read_error
        with self._lock:
            try:
                data = self.filesystem[path]
            except KeyError:
                raise FileNotFoundError(f"File at '{path}' not found") from None
        return io.BytesIO(data)

    def write(self, path: str, data: bytes) -> None:
        if self.write_error is not None:
            raise self.write_error
        with self._lock:
            self.filesystem[path] = bytes(data)

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        if self.write_stream_error is not None:
            raise self.write_stream_error
        rewind(stream, path)
        data = stream.read()
        with self._lock:
            self.filesystem[path] = data

    def delete(self, path: str) -> None:
        # Like S3, deleting a missing key is not an error.
        with self._lock:
            self.filesystem.pop(path, None)

    def list_files(self, path: str) -> list[str]:
        """List stored paths under the ``path`` prefix, grouped on ``/``."""
        prefixes: list[str] = []
        files: list[str] = []
        with self._lock:
            for name in self.filesystem:
                if not name.startswith(path):
                    continue
                rest = name[len(path) :]
                if "/" in rest:
                    prefix = path + rest.split("/", 1)[0] + "/"
                    if prefix not in prefixes:
                        prefixes.append(prefix)
                else:
                    files.append(name)
        return prefixes + files

    def exists(self, path: str) -> bool:
        with self._lock:
            return path in self.filesystem
