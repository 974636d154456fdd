from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from deck_site.domain.models import CheckResult, CheckStatus, VerificationReport
from deck_site.ports.filesystem import FileSystem

logger = logging.getLogger(__name__)

SECTION_OUTPUT_DIR = "Output directory"
SECTION_FILES = "Required files"
SECTION_DIRS = "Required directories"
SECTION_ASSETS = "Required assets"
SECTION_DECKS = "Presentation files"
SECTION_INDEX = "Landing page content"
SECTION_SLIDE_ASSETS = "Slide-specific assets"

MAX_LISTED_DECKS = 5

HREF_RE = re.compile(r"""href\s*=\s*["']([^"']+)["']""", re.IGNORECASE)


def _result(section: str, name: str, ok: bool, *details: str) -> CheckResult:
    return CheckResult(
        section=section,
        name=name,
        status=CheckStatus.PASS if ok else CheckStatus.FAIL,
        details=tuple(details),
    )


@dataclass
class BuildVerifier:
    """
    Smoke test for a finished output tree.
    Every check runs and is reported; only a missing output directory stops early.
    Expectations are derived from settings and the source tree, not from the build code.
    """
    fs: FileSystem
    output_dir: Path
    source_assets_dir: Path
    required_files: tuple[str, ...] = ()
    required_dirs: tuple[str, ...] = ()
    required_assets: tuple[str, ...] = ()
    index_file: str = "index.html"
    favicon_file: str = "favicon.ico"
    rendered_extension: str = ".html"

    def verify(self) -> VerificationReport:
        if not self.fs.is_dir(self.output_dir):
            logger.debug("Output directory %s missing, aborting verification", self.output_dir)
            missing = _result(
                SECTION_OUTPUT_DIR,
                f"{self.output_dir.name}/ directory exists",
                False,
                "Run: python -m deck_site build",
            )
            return VerificationReport(checks=(missing,), aborted=True)

        checks: list[CheckResult] = [
            _result(SECTION_OUTPUT_DIR, f"{self.output_dir.name}/ directory exists", True)
        ]
        checks += self.check_required_files()
        checks += self.check_required_dirs()
        checks += self.check_required_assets()
        checks.append(self.check_presentation_files())
        checks += self.check_index_content()
        checks += self.check_slide_assets()
        return VerificationReport(checks=tuple(checks))

    def check_required_files(self) -> list[CheckResult]:
        return [
            _result(SECTION_FILES, f, self.fs.exists(self.output_dir / f))
            for f in self.required_files
        ]

    def check_required_dirs(self) -> list[CheckResult]:
        return [
            _result(SECTION_DIRS, f"{d}/", self.fs.is_dir(self.output_dir / d))
            for d in self.required_dirs
        ]

    def check_required_assets(self) -> list[CheckResult]:
        return [
            _result(SECTION_ASSETS, a, self.fs.exists(self.output_dir / a))
            for a in self.required_assets
        ]

    def check_presentation_files(self) -> CheckResult:
        name = "presentation files present"
        try:
            entries = self.fs.list_dir(self.output_dir)
        except OSError as e:
            return _result(SECTION_DECKS, name, False, f"Cannot list {self.output_dir}: {e}")

        decks = [
            e for e in entries
            if e.endswith(self.rendered_extension)
            and e != self.index_file
            and self.fs.is_file(self.output_dir / e)
        ]
        if not decks:
            return _result(
                SECTION_DECKS,
                name,
                False,
                f"Expected: at least one {self.rendered_extension} file (besides {self.index_file})",
            )

        details = [f"Found {len(decks)} presentation file(s):"]
        details += [f"- {d}" for d in decks[:MAX_LISTED_DECKS]]
        if len(decks) > MAX_LISTED_DECKS:
            details.append(f"... and {len(decks) - MAX_LISTED_DECKS} more")
        return _result(SECTION_DECKS, name, True, *details)

    def _links_to_deck(self, content: str) -> bool:
        for target in HREF_RE.findall(content):
            base = target.split("#", 1)[0].split("?", 1)[0]
            if base.endswith(self.rendered_extension) and base.rsplit("/", 1)[-1] != self.index_file:
                return True
        return False

    def check_index_content(self) -> list[CheckResult]:
        index_path = self.output_dir / self.index_file
        if not self.fs.is_file(index_path):
            return [_result(SECTION_INDEX, "landing page readable", False, f"{self.index_file} missing")]
        try:
            content = self.fs.read_text(index_path)
        except (OSError, UnicodeDecodeError) as e:
            return [_result(SECTION_INDEX, "landing page readable", False, str(e))]

        predicates: list[tuple[str, Callable[[str], bool]]] = [
            ("has DOCTYPE", lambda c: "<!doctype html>" in c.lower()),
            ("has title", lambda c: re.search(r"<title\b", c, re.IGNORECASE) is not None),
            ("has favicon link", lambda c: self.favicon_file in c),
            ("has presentation links", self._links_to_deck),
        ]
        return [_result(SECTION_INDEX, name, test(content)) for name, test in predicates]

    def check_slide_assets(self) -> list[CheckResult]:
        src_root = self.source_assets_dir
        label = f"{src_root.parent.name}/{src_root.name}/"
        if not self.fs.is_dir(src_root):
            return [CheckResult(SECTION_SLIDE_ASSETS, f"No {label} directory found, skipping", CheckStatus.SKIP)]

        try:
            asset_dirs = [d for d in self.fs.list_dir(src_root) if self.fs.is_dir(src_root / d)]
        except OSError as e:
            return [_result(SECTION_SLIDE_ASSETS, f"{label} readable", False, str(e))]
        if not asset_dirs:
            return [CheckResult(SECTION_SLIDE_ASSETS, f"No asset directories in {label}, skipping", CheckStatus.SKIP)]

        out_root = self.output_dir / "assets"
        results = []
        for d in asset_dirs:
            dest = out_root / d
            if not self.fs.is_dir(dest):
                results.append(_result(SECTION_SLIDE_ASSETS, f"Asset directory not copied: {d}/", False))
                continue

            try:
                source_files = self.fs.list_dir(src_root / d)
            except OSError as e:
                results.append(_result(SECTION_SLIDE_ASSETS, f"{label}{d}/ readable", False, str(e)))
                continue

            missing = [f for f in source_files if not self.fs.exists(dest / f)]
            if missing:
                results.append(
                    _result(
                        SECTION_SLIDE_ASSETS,
                        f"Some files not copied in: {d}/",
                        False,
                        *(f"Missing: {f}" for f in missing),
                    )
                )
            else:
                results.append(
                    _result(SECTION_SLIDE_ASSETS, f"Assets copied: {d}/ ({len(source_files)} file(s))", True)
                )
        return results
