from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from deck_site.domain.errors import OutputDirectoryError
from deck_site.ports.filesystem import FileSystem

logger = logging.getLogger(__name__)


@dataclass
class FaviconProvisioner:
    """
    Copies the theme favicon into the output directory.
    A missing source favicon is skipped with a warning, not treated as an error.
    """
    fs: FileSystem
    source: Path
    file_name: str = "favicon.ico"

    def provision(self, output_dir: Path) -> bool:
        if not self.fs.is_file(self.source):
            logger.warning("Favicon not found at %s - skipping favicon copy", self.source)
            return False

        dest = output_dir / self.file_name
        try:
            self.fs.make_dirs(output_dir)
            self.fs.copy_file(self.source, dest)
        except OSError as e:
            raise OutputDirectoryError(f"Failed to copy favicon to {dest}: {e}") from e

        logger.info("Favicon copied to %s", dest)
        return True
