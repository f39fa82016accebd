"""Local filesystem backend — stdlib-only implementation."""

from __future__ import annotations

import os
import pathlib
import shutil
from typing import BinaryIO

from pathio._backend import Backend

# Mode for directories created on write.
_DIR_MODE = 0o700


def _make_parents(parent: str) -> None:
    """Create ``parent`` and every missing ancestor with :data:`_DIR_MODE`.

    ``os.makedirs`` applies its mode to the leaf only, so each level is made
    individually from the top down. Existing directories keep their mode.
    """
    target = pathlib.Path(parent)
    for directory in (*reversed(target.parents), target):
        if not directory.is_dir():
            directory.mkdir(mode=_DIR_MODE, exist_ok=True)


class LocalBackend(Backend):
    """Local filesystem backend.

    Paths are handed to the OS as given: no normalization, no symlink
    resolution, no root confinement. Filesystem errors are never wrapped.
    """

    @property
    def name(self) -> str:
        return "local"

    def read(self, path: str) -> BinaryIO:
        return open(path, "rb")  # noqa: SIM115

    def write_stream(self, path: str, stream: BinaryIO) -> None:
        parent = os.path.dirname(path)
        if parent:
            _make_parents(parent)
        with open(path, "wb") as f:
            shutil.copyfileobj(stream, f)

    def delete(self, path: str) -> None:
        os.remove(path)

    def list_files(self, path: str) -> list[str]:
        return os.listdir(path)

    def exists(self, path: str) -> bool:
        try:
            os.stat(path)
        except (FileNotFoundError, NotADirectoryError):
            return False
        return True
