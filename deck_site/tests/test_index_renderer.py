from pathlib import Path

from conftest import make_settings
from deck_site.domain.models import Manifest, PresentationMetadata
from deck_site.renderers.index_renderer import JinjaIndexRenderer


def _manifest(*entries):
    return Manifest(entries=tuple(entries))


def test_shell_is_present_for_empty_manifest(tmp_path: Path):
    html = JinjaIndexRenderer(settings=make_settings(tmp_path)).render(_manifest())

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>Presentations - Test</title>" in html
    assert 'href="favicon.ico"' in html
    assert 'href="https://marp.app/"' in html
    assert 'class="presentation-card"' not in html


def test_one_card_per_entry_in_manifest_order(tmp_path: Path):
    manifest = _manifest(
        PresentationMetadata("Newest", "2024-03-05", "Conf X", "2024-03-05-new.html"),
        PresentationMetadata("Older", "2024-01-01", "", "2024-01-01-old.html"),
        PresentationMetadata("Undated", "", "", "undated.html"),
    )
    html = JinjaIndexRenderer(settings=make_settings(tmp_path)).render(manifest)

    assert html.count('class="presentation-card"') == 3
    assert html.index("2024-03-05-new.html") < html.index("2024-01-01-old.html") < html.index("undated.html")
    assert html.count('class="presentation-date"') == 2
    assert html.count('class="presentation-header"') == 1
    assert '<span class="presentation-header">Conf X</span>' in html


def test_values_are_html_escaped(tmp_path: Path):
    manifest = _manifest(PresentationMetadata("Rust <3 & Go", "", "A \"B\"", "x.html"))
    html = JinjaIndexRenderer(settings=make_settings(tmp_path)).render(manifest)

    assert "Rust &lt;3 &amp; Go" in html
    assert "<3" not in html


def test_render_is_deterministic(tmp_path: Path):
    manifest = _manifest(PresentationMetadata("T", "2024-01-01", "H", "t.html"))
    renderer = JinjaIndexRenderer(settings=make_settings(tmp_path))
    assert renderer.render(manifest) == renderer.render(manifest)
