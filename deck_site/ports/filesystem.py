from __future__ import annotations

from pathlib import Path


class FileSystem:
    """
    Port interface: the filesystem capabilities the build and verify steps need.
    Implemented by LocalFileSystem for real disks and by an in-memory fake in tests.
    """

    def exists(self, path: Path) -> bool:
        raise NotImplementedError

    def is_file(self, path: Path) -> bool:
        raise NotImplementedError

    def is_dir(self, path: Path) -> bool:
        raise NotImplementedError

    def list_dir(self, path: Path) -> list[str]:
        """Entry names of a directory, sorted. Raises OSError if it cannot be listed."""
        raise NotImplementedError

    def read_text(self, path: Path) -> str:
        raise NotImplementedError

    def write_text(self, path: Path, text: str) -> None:
        raise NotImplementedError

    def make_dirs(self, path: Path) -> None:
        raise NotImplementedError

    def copy_file(self, src: Path, dst: Path) -> None:
        raise NotImplementedError
