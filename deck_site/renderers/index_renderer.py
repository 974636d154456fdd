from __future__ import annotations

from dataclasses import dataclass, field

from jinja2 import Environment, PackageLoader, select_autoescape

from deck_site.config.ini_config import SiteSettings
from deck_site.domain.models import Manifest

INDEX_TEMPLATE = "index.html"


class IndexRenderer:
    """Strategy interface."""
    def render(self, manifest: Manifest) -> str:
        raise NotImplementedError


def _make_env() -> Environment:
    return Environment(
        loader=PackageLoader("deck_site", "templates"),
        autoescape=select_autoescape(["html"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


@dataclass
class JinjaIndexRenderer(IndexRenderer):
    """
    Renders the landing page from templates/index.html.
    The page shell comes from settings only; no clock or environment data goes in,
    so the same manifest always renders to the same bytes.
    """
    settings: SiteSettings
    env: Environment = field(default_factory=_make_env)

    def render(self, manifest: Manifest) -> str:
        template = self.env.get_template(INDEX_TEMPLATE)
        return template.render(
            site_title=self.settings.site_title,
            site_subtitle=self.settings.site_subtitle,
            favicon_file=self.settings.favicon_file,
            footer_links=self.settings.footer_links,
            presentations=list(manifest),
        )
