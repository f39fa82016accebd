"""Error hierarchy for pathio.

Only failures produced by this layer itself are typed here. Errors raised by
the filesystem or by botocore propagate to the caller unmodified.
"""

from __future__ import annotations

from typing import Optional


class PathioError(Exception):
    """Base class for all pathio errors.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    :param backend: The backend name involved, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, backend: Optional[str] = None) -> None:
        self.path = path
        self.backend = backend
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        if self.backend is not None:
            parts.append(f"backend={self.backend!r}")
        return " | ".join(parts) if len(parts) > 1 else parts[0]

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(self.args[0] if self.args else "")]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        if self.backend is not None:
            args.append(f"backend={self.backend!r}")
        return f"{cls}({', '.join(args)})"


class InvalidPath(PathioError):
    """Raised when an S3 path does not decompose into bucket and key."""


class SeekFailed(PathioError):
    """Raised when write input cannot be rewound to offset 0."""


class RegionLookupFailed(PathioError):
    """Raised when the region of a bucket cannot be determined.

    The underlying SDK error is available as ``__cause__``.

    :param bucket: The bucket whose location was requested.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        backend: Optional[str] = None,
        bucket: str = "",
    ) -> None:
        self.bucket = bucket
        super().__init__(message, path=path, backend=backend)

    def __str__(self) -> str:
        base = super().__str__()
        if self.bucket:
            return f"{base} | bucket={self.bucket!r}"
        return base

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(self.args[0] if self.args else "")]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        if self.backend is not None:
            args.append(f"backend={self.backend!r}")
        if self.bucket:
            args.append(f"bucket={self.bucket!r}")
        return f"{cls}({', '.join(args)})"
