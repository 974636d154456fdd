from __future__ import annotations

import shutil
from pathlib import Path

from deck_site.ports.filesystem import FileSystem


class LocalFileSystem(FileSystem):
    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def list_dir(self, path: Path) -> list[str]:
        return sorted(p.name for p in Path(path).iterdir())

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, text: str) -> None:
        # newline="" keeps output byte-identical across platforms
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def copy_file(self, src: Path, dst: Path) -> None:
        shutil.copyfile(src, dst)
