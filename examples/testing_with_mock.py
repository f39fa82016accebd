"""Testing with MockClient — swap the real client for an in-memory one.

Code that accepts any ``pathio.Pathio`` can be exercised without disk or
network, including its failure paths.
"""

from __future__ import annotations

from pathio import MockClient, Pathio


def archive_report(storage: Pathio, name: str, body: bytes) -> str:
    path = f"s3://reports/archive/{name}"
    storage.write(path, body)
    return path


if __name__ == "__main__":
    mock = MockClient()
    path = archive_report(mock, "q4.csv", b"revenue,profit\n100,20\n")
    print(f"Stored {path}: {mock.filesystem[path]!r}")
    print(f"Listing: {mock.list_files('s3://reports/')}")

    # --- Injected failure ---
    failing = MockClient(write_error=OSError("simulated outage"))
    try:
        archive_report(failing, "q4.csv", b"")
    except OSError as exc:
        print(f"\nInjected failure: {exc}")
        print(f"Map untouched: {failing.filesystem}")

    print("\nDone!")
