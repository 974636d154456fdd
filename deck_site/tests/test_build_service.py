from __future__ import annotations

import logging
from pathlib import Path

import pytest

from conftest import FakeFileSystem, make_settings
from deck_site.app_factory import make_build_service
from deck_site.domain.errors import OutputDirectoryError, SourceDirectoryError


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


@pytest.fixture
def site(tmp_path: Path) -> Path:
    _write(tmp_path / "slides" / "2024-05-01-talk.md", '---\nheader: "Conf X"\n---\n# My Talk\n')
    _write(tmp_path / "slides" / "2023-01-01-old.md", "# Old Talk\n")
    _write(tmp_path / "slides" / "workshop.md", "---\nfooter: Autumn\n---\n")
    _write(tmp_path / "themes" / "assets" / "favicon.ico", "ICO")
    return tmp_path


def test_build_writes_index_and_favicon(site: Path):
    settings = make_settings(site)

    result = make_build_service(settings).build()

    index = site / "dist" / "index.html"
    assert result.index_path == index
    assert result.deck_count == 3
    assert result.favicon_copied is True
    assert (site / "dist" / "favicon.ico").read_text(encoding="utf-8") == "ICO"

    html = index.read_text(encoding="utf-8")
    assert html.count('class="presentation-card"') == 3
    assert html.index("workshop.html") < html.index("2024-05-01-talk.html") < html.index("2023-01-01-old.html")
    assert "<h2 class=\"presentation-title\">workshop</h2>" in html


def test_build_is_idempotent(site: Path):
    settings = make_settings(site)
    service = make_build_service(settings)

    service.build()
    first = (site / "dist" / "index.html").read_bytes()
    service.build()
    second = (site / "dist" / "index.html").read_bytes()

    assert first == second


def test_build_overwrites_previous_index(site: Path):
    _write(site / "dist" / "index.html", "stale")
    make_build_service(make_settings(site)).build()
    assert "stale" not in (site / "dist" / "index.html").read_text(encoding="utf-8")


def test_build_without_favicon_source_skips_copy(site: Path, caplog):
    (site / "themes" / "assets" / "favicon.ico").unlink()

    with caplog.at_level(logging.WARNING):
        result = make_build_service(make_settings(site)).build()

    assert result.favicon_copied is False
    assert not (site / "dist" / "favicon.ico").exists()
    assert "skipping favicon copy" in caplog.text


def test_missing_source_directory_is_fatal_and_writes_nothing(tmp_path: Path):
    with pytest.raises(SourceDirectoryError):
        make_build_service(make_settings(tmp_path)).build()
    assert not (tmp_path / "dist").exists()


def test_unwritable_output_is_fatal():
    class ReadOnlyFs(FakeFileSystem):
        def write_text(self, path, text):
            if str(path).endswith("index.html"):
                raise PermissionError("read-only")
            super().write_text(path, text)

    fs = ReadOnlyFs(files={"/site/slides/a.md": "# A"})
    settings = make_settings(Path("/site"))

    with pytest.raises(OutputDirectoryError):
        make_build_service(settings, fs=fs).build()


def test_build_against_fake_tree():
    fs = FakeFileSystem(
        files={
            "/site/slides/2024-01-01-a.md": "# A",
            "/site/themes/assets/favicon.ico": "ICO",
        }
    )
    result = make_build_service(make_settings(Path("/site")), fs=fs).build()

    assert result.deck_count == 1
    assert fs.is_file(Path("/site/dist/index.html"))
    assert fs.read_text(Path("/site/dist/favicon.ico")) == "ICO"
