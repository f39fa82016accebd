"""Quickstart — write, read, list and delete with the default client.

Demonstrates:
- The module-level functions bound to the default client
- Local paths and ``s3://bucket/key`` paths behind the same calls

Set ``PATHIO_S3_ROOT`` (e.g. ``s3://my-bucket/tmp/``) to run the same steps
against S3 using the standard AWS credential chain.
"""

from __future__ import annotations

import os
import tempfile

import pathio

if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmp:
        roots = [f"{tmp}/"]
        if os.environ.get("PATHIO_S3_ROOT"):
            roots.append(os.environ["PATHIO_S3_ROOT"])

        for root in roots:
            path = f"{root}reports/hello.txt"

            # Write a file (parent directories are created locally)
            pathio.write(path, b"Hello, world!")
            print(f"{path} exists: {pathio.exists(path)}")

            # Read it back; the caller closes the stream
            with pathio.read(path) as reader:
                print(f"Content: {reader.read()!r}")

            # List one level, without recursion
            print(f"Listing: {pathio.list_files(f'{root}reports/')}")

            pathio.delete(path)
            print(f"After delete: {pathio.exists(path)}")

    print("Done! Temp directory cleaned up automatically.")
