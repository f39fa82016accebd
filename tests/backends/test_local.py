"""Local backend tests."""

from __future__ import annotations

import io
import os
from typing import TYPE_CHECKING

import pytest

from pathio.backends._local import LocalBackend

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture
def local_backend() -> LocalBackend:
    return LocalBackend()


class TestLocalBackendIdentity:
    def test_name(self, local_backend: LocalBackend) -> None:
        assert local_backend.name == "local"


class TestLocalBackendRead:
    def test_read_returns_open_file(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        path = tmp_path / "pathioFileReaderTest"
        path.write_bytes(b"fileReaderTest\nsecond line")
        with local_backend.read(str(path)) as f:
            assert f.readline() == b"fileReaderTest\n"

    def test_missing_raises_file_not_found(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            local_backend.read(str(tmp_path / "nope"))

    def test_directory_raises_os_error(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            local_backend.read(str(tmp_path))


class TestLocalBackendWrite:
    def test_truncates_existing(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"a much longer earlier body")
        local_backend.write_stream(str(path), io.BytesIO(b"short"))
        assert path.read_bytes() == b"short"

    def test_bare_filename_in_cwd(
        self, local_backend: LocalBackend, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        local_backend.write("plain.txt", b"here")
        assert (tmp_path / "plain.txt").read_bytes() == b"here"

    def test_creates_parents(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        path = tmp_path / "x" / "y" / "z.txt"
        local_backend.write(str(path), b"deep")
        assert path.read_bytes() == b"deep"

    def test_every_created_parent_is_private(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        local_backend.write(str(tmp_path / "x" / "y" / "z" / "f.txt"), b"")
        for directory in (tmp_path / "x", tmp_path / "x" / "y", tmp_path / "x" / "y" / "z"):
            assert (os.stat(directory).st_mode & 0o777) == 0o700, directory

    def test_existing_parent_keeps_mode(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        existing = tmp_path / "shared"
        existing.mkdir()
        os.chmod(existing, 0o755)
        local_backend.write(str(existing / "new" / "f.txt"), b"")
        assert (os.stat(existing).st_mode & 0o777) == 0o755
        assert (os.stat(existing / "new").st_mode & 0o777) == 0o700

    def test_relative_nested_path(
        self, local_backend: LocalBackend, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        local_backend.write("rel/dir/f.txt", b"rel")
        assert (tmp_path / "rel" / "dir" / "f.txt").read_bytes() == b"rel"
        assert (os.stat(tmp_path / "rel").st_mode & 0o777) == 0o700


class TestLocalBackendDelete:
    def test_delete(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        path = tmp_path / "f.txt"
        path.write_bytes(b"x")
        local_backend.delete(str(path))
        assert not path.exists()

    def test_missing_raises(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            local_backend.delete(str(tmp_path / "missing"))


class TestLocalBackendExists:
    def test_file(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        (tmp_path / "f").write_bytes(b"")
        assert local_backend.exists(str(tmp_path / "f")) is True

    def test_directory(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        assert local_backend.exists(str(tmp_path)) is True

    def test_missing(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        assert local_backend.exists(str(tmp_path / "missing")) is False

    def test_file_used_as_directory(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        (tmp_path / "f").write_bytes(b"")
        assert local_backend.exists(str(tmp_path / "f" / "child")) is False

    def test_other_errors_raise(self, local_backend: LocalBackend) -> None:
        with pytest.raises(ValueError):
            local_backend.exists("bad\0path")


class TestLocalBackendListFiles:
    def test_names_only(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        (tmp_path / "a.txt").write_bytes(b"")
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "inner.txt").write_bytes(b"")
        assert sorted(local_backend.list_files(str(tmp_path))) == ["a.txt", "sub"]

    def test_missing_directory_raises(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            local_backend.list_files(str(tmp_path / "nope"))

    def test_unsorted_contract_matches_listdir(self, local_backend: LocalBackend, tmp_path: Path) -> None:
        for name in ("c", "a", "b"):
            (tmp_path / name).write_bytes(b"")
        assert local_backend.list_files(str(tmp_path)) == os.listdir(tmp_path)
