from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from deck_site.domain.errors import SourceDirectoryError
from deck_site.domain.models import Manifest, PresentationMetadata, SourceDocument
from deck_site.ports.filesystem import FileSystem
from deck_site.services.metadata_extractor import MetadataExtractor

logger = logging.getLogger(__name__)


def order_by_date(items: list[PresentationMetadata]) -> list[PresentationMetadata]:
    """
    Newest first by plain string comparison of `date`.
    sorted() is stable with reverse=True, so equal dates keep discovery order.
    """
    return sorted(items, key=lambda m: m.date, reverse=True)


@dataclass
class ManifestBuilder:
    """
    Discovers deck sources (non-recursive) and turns them into an ordered Manifest.
    """
    fs: FileSystem
    extractor: MetadataExtractor

    def discover(self, slides_dir: Path) -> list[Path]:
        if not self.fs.is_dir(slides_dir):
            raise SourceDirectoryError(f"Source directory not found: {slides_dir}")
        try:
            names = self.fs.list_dir(slides_dir)
        except OSError as e:
            raise SourceDirectoryError(f"Cannot read source directory {slides_dir}: {e}") from e

        ext = self.extractor.source_extension
        return [
            slides_dir / name
            for name in names
            if name.endswith(ext) and self.fs.is_file(slides_dir / name)
        ]

    def load(self, path: Path) -> SourceDocument:
        try:
            content = self.fs.read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            # fall back to file-name derived values for this deck only
            logger.warning("Could not read %s (%s); using file name for metadata", path, e)
            content = ""
        return SourceDocument(path=path, raw_content=content)

    def build(self, slides_dir: Path) -> Manifest:
        items = [self.extractor.extract_document(self.load(p)) for p in self.discover(slides_dir)]
        manifest = Manifest(entries=tuple(order_by_date(items)))
        logger.debug("Manifest built from %s: %d entries", slides_dir, len(manifest))
        return manifest
