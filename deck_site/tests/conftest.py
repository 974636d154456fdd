from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Dict, Optional, Set

import pytest

from deck_site.config.ini_config import FooterLink, SiteSettings
from deck_site.ports.filesystem import FileSystem


# -----------------------------
# Test doubles
# -----------------------------
class FakeFileSystem(FileSystem):
    """In-memory tree keyed by posix path strings; parent dirs are implied by files."""

    def __init__(self, files: Optional[Dict[str, str]] = None, dirs: Optional[Set[str]] = None):
        self.files: Dict[str, str] = {}
        self.dirs: Set[str] = set()
        self.unreadable: Set[str] = set()
        for d in dirs or ():
            self.make_dirs(Path(d))
        for p, text in (files or {}).items():
            self.write_text(Path(p), text)

    @staticmethod
    def _key(path) -> str:
        return str(PurePosixPath(str(path)))

    def _add_parents(self, key: str) -> None:
        for parent in PurePosixPath(key).parents:
            self.dirs.add(str(parent))

    def exists(self, path) -> bool:
        k = self._key(path)
        return k in self.files or k in self.dirs

    def is_file(self, path) -> bool:
        return self._key(path) in self.files

    def is_dir(self, path) -> bool:
        return self._key(path) in self.dirs

    def list_dir(self, path) -> list[str]:
        k = self._key(path)
        if k in self.unreadable:
            raise PermissionError(f"permission denied: {k}")
        if k not in self.dirs:
            raise FileNotFoundError(k)
        names = {
            PurePosixPath(p).name
            for p in (self.files.keys() | self.dirs)
            if str(PurePosixPath(p).parent) == k and p != k
        }
        return sorted(names)

    def read_text(self, path) -> str:
        k = self._key(path)
        if k in self.unreadable:
            raise PermissionError(f"permission denied: {k}")
        if k not in self.files:
            raise FileNotFoundError(k)
        return self.files[k]

    def write_text(self, path, text: str) -> None:
        k = self._key(path)
        self._add_parents(k)
        self.files[k] = text

    def make_dirs(self, path) -> None:
        k = self._key(path)
        self._add_parents(k)
        self.dirs.add(k)

    def copy_file(self, src, dst) -> None:
        self.write_text(dst, self.read_text(src))


# -----------------------------
# Helpers
# -----------------------------
def make_settings(root: Path, **overrides) -> SiteSettings:
    values = dict(
        slides_dir=root / "slides",
        output_dir=root / "dist",
        favicon_source=root / "themes" / "assets" / "favicon.ico",
        source_assets_dir=root / "slides" / "assets",
        source_extension=".md",
        rendered_extension=".html",
        index_file="index.html",
        favicon_file="favicon.ico",
        site_title="Presentations - Test",
        site_subtitle="Talks",
        footer_links=(FooterLink("MARP", "https://marp.app/"),),
        required_files=("index.html", "favicon.ico"),
        required_dirs=("assets", "assets/ederav2"),
        required_assets=("assets/ederav2/edera-logo.png",),
        flask_host="127.0.0.1",
        flask_port=8080,
        flask_debug=False,
        log_level="INFO",
    )
    values.update(overrides)
    return SiteSettings(**values)


@pytest.fixture
def fake_fs() -> FakeFileSystem:
    return FakeFileSystem()


@pytest.fixture
def settings(tmp_path: Path) -> SiteSettings:
    return make_settings(tmp_path)
