from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from deck_site.domain.errors import OutputDirectoryError
from deck_site.domain.models import BuildResult
from deck_site.ports.filesystem import FileSystem
from deck_site.renderers.index_renderer import IndexRenderer
from deck_site.services.favicon import FaviconProvisioner
from deck_site.services.manifest_service import ManifestBuilder

logger = logging.getLogger(__name__)


@dataclass
class BuildService:
    """
    Service layer: one landing-page build.
    Manifest -> render -> write index, then the optional favicon copy.
    Directory-level failures raise; single-deck problems never do.
    """
    fs: FileSystem
    manifest_builder: ManifestBuilder
    renderer: IndexRenderer
    slides_dir: Path
    output_dir: Path
    index_file: str = "index.html"
    favicon: Optional[FaviconProvisioner] = None

    def build(self) -> BuildResult:
        manifest = self.manifest_builder.build(self.slides_dir)
        html = self.renderer.render(manifest)

        index_path = self.output_dir / self.index_file
        try:
            self.fs.make_dirs(self.output_dir)
            self.fs.write_text(index_path, html)
        except OSError as e:
            raise OutputDirectoryError(f"Cannot write {index_path}: {e}") from e

        logger.info("Generated %s with %d presentations", self.index_file, len(manifest))

        favicon_copied = self.favicon.provision(self.output_dir) if self.favicon else False

        return BuildResult(
            index_path=index_path,
            deck_count=len(manifest),
            favicon_copied=favicon_copied,
        )
