"""The pathio interface and the backend base class."""

from __future__ import annotations

import abc
import io
from typing import BinaryIO

from pathio._errors import SeekFailed


def rewind(stream: BinaryIO, path: str = "") -> None:
    """Seek ``stream`` back to offset 0.

    Streams whose ``seek`` returns ``None`` are checked with ``tell()``.

    :raises SeekFailed: If the stream cannot seek or lands anywhere but 0.
    """
    try:
        pos = stream.seek(0, io.SEEK_SET)
        if pos is None:
            pos = stream.tell()
    except (AttributeError, OSError, ValueError) as exc:
        raise SeekFailed(f"Failed to seek body to start: {exc}", path=path or None) from exc
    if pos != 0:
        raise SeekFailed(f"Failed to seek body to start, landed at offset {pos}", path=path or None)


class Pathio(abc.ABC):
    """The six operations every pathio implementation offers.

    Implemented by :class:`~pathio.Client` (which routes on the path) and by
    :class:`~pathio.MockClient` (in memory, for tests).
    """

    @abc.abstractmethod
    def read(self, path: str) -> BinaryIO:
        """Open ``path`` for reading. The caller must close the stream."""

    def write(self, path: str, data: bytes) -> None:
        """Write ``data`` to ``path``, replacing any existing content."""
        self.write_stream(path, io.BytesIO(data))

    @abc.abstractmethod
    def write_stream(self, path: str, stream: BinaryIO) -> None:
        """Write the full content of a seekable ``stream`` to ``path``."""

    @abc.abstractmethod
    def delete(self, path: str) -> None:
        """Delete the file or object at ``path``."""

    @abc.abstractmethod
    def list_files(self, path: str) -> list[str]:
        """List the immediate entries under ``path``. Does not recurse."""

    @abc.abstractmethod
    def exists(self, path: str) -> bool:
        """Return whether ``path`` exists. A missing path is not an error."""


class Backend(Pathio):
    """Base class for the storage backends a client dispatches to.

    Backends receive streams already rewound by the client, and let errors
    from the filesystem or the SDK propagate unmodified.
    """

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """Unique identifier for this backend type (``'local'`` or ``'s3'``)."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
