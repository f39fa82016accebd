"""Streaming I/O — write from a stream, read as a stream, chunked processing.

Writes always start from the first byte of the stream, wherever its read
position happens to be.
"""

from __future__ import annotations

import io
import tempfile

from pathio import Client

if __name__ == "__main__":
    client = Client()
    with tempfile.TemporaryDirectory() as tmp:
        # --- Write from a BytesIO stream that was already partly consumed ---
        stream = io.BytesIO(b"line1\nline2\nline3\nline4\nline5\n")
        stream.readline()
        client.write_stream(f"{tmp}/streamed.txt", stream)
        print("Wrote file from BytesIO stream.")

        # --- Read as a stream ---
        with client.read(f"{tmp}/streamed.txt") as reader:
            print("\nStreaming read:")
            newline = b"\n"
            for line in reader:
                print(f"  {line.rstrip(newline)}")

        # --- Chunked processing ---
        client.write(f"{tmp}/large.bin", b"X" * 10_000)
        total = 0
        chunk_count = 0
        with client.read(f"{tmp}/large.bin") as reader:
            while True:
                chunk = reader.read(4096)
                if not chunk:
                    break
                total += len(chunk)
                chunk_count += 1
        print(f"\nRead large.bin in {chunk_count} chunk(s), {total} bytes total.")

    print("\nDone!")
