"""Error handling — pathio errors versus raw filesystem and SDK errors.

pathio raises its own errors only for problems it detects itself
(``InvalidPath``, ``SeekFailed``, ``RegionLookupFailed``). Everything else is
the untouched ``OSError`` or botocore error.
"""

from __future__ import annotations

import io
import tempfile

from pathio import Client, ClientConfig, InvalidPath, PathioError, SeekFailed


class _NoSeek(io.BytesIO):
    def seek(self, offset: int, whence: int = io.SEEK_SET) -> int:
        raise OSError("stream is not seekable")


if __name__ == "__main__":
    client = Client(ClientConfig(disable_encryption=True))

    # --- InvalidPath: raised before any network call ---
    try:
        client.read("s3://onlybucket")
    except InvalidPath as exc:
        print(f"InvalidPath: {exc}")
        print(f"  path={exc.path}, backend={exc.backend}")

    with tempfile.TemporaryDirectory() as tmp:
        # --- Missing local files surface as the raw OSError ---
        try:
            client.read(f"{tmp}/missing.txt")
        except FileNotFoundError as exc:
            print(f"\nFileNotFoundError: {exc}")

        # --- ...but exists() turns not-found into False ---
        print(f"exists(missing) -> {client.exists(f'{tmp}/missing.txt')}")

        # --- SeekFailed: the write input must rewind to offset 0 ---
        try:
            client.write_stream(f"{tmp}/out.txt", _NoSeek(b"data"))
        except SeekFailed as exc:
            print(f"\nSeekFailed: {exc}")
            print(f"  caused by: {exc.__cause__!r}")

    # --- Catch any pathio error with the base class ---
    for path in ["s3://", "s3://bucket-only"]:
        try:
            client.exists(path)
        except PathioError as exc:
            print(f"\nPathioError ({type(exc).__name__}): {exc}")

    print("\nDone!")
