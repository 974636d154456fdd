from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from deck_site.domain.models import PresentationMetadata, SourceDocument

FRONT_MATTER_DELIMITER = "---"
TITLE_MARKER = "# "
FOOTER_KEY = "footer:"
HEADER_KEY = "header:"

DATE_PREFIX = re.compile(r"^(\d{4}-\d{2}-\d{2})")


class FrontMatterState(Enum):
    BEFORE = "before"
    INSIDE = "inside"
    AFTER = "after"


def next_state(state: FrontMatterState, line: str) -> FrontMatterState:
    """
    Transition for one trimmed line.
    Only the first delimited block counts; once AFTER, delimiters are slide separators.
    An unclosed block stays INSIDE until the end of the document.
    """
    if line != FRONT_MATTER_DELIMITER:
        return state
    if state is FrontMatterState.BEFORE:
        return FrontMatterState.INSIDE
    if state is FrontMatterState.INSIDE:
        return FrontMatterState.AFTER
    return state


def _strip_quotes(value: str) -> str:
    return value.strip().strip("\"'").strip()


def _value_after(line: str, key: str) -> str:
    return _strip_quotes(line[len(key):])


@dataclass(frozen=True)
class MetadataExtractor:
    """
    Derives title/date/header from a deck source. Never raises on content:
    anything it cannot find falls back to the file name or an empty string.
    """
    source_extension: str = ".md"
    rendered_extension: str = ".html"

    def base_name(self, file_name: str) -> str:
        if self.source_extension and file_name.endswith(self.source_extension):
            return file_name[: -len(self.source_extension)]
        return file_name

    def rendered_file_name(self, file_name: str) -> str:
        return self.base_name(file_name) + self.rendered_extension

    def extract(self, file_name: str, content: str) -> PresentationMetadata:
        state = FrontMatterState.BEFORE
        title = ""
        footer = ""
        header = ""

        for raw_line in (content or "").splitlines():
            line = raw_line.strip()

            new_state = next_state(state, line)
            if new_state is not state:
                state = new_state
                continue

            if state is FrontMatterState.INSIDE:
                if line.startswith(FOOTER_KEY):
                    footer = _value_after(line, FOOTER_KEY)
                elif line.startswith(HEADER_KEY):
                    header = _value_after(line, HEADER_KEY)
                continue

            if line.startswith(TITLE_MARKER):
                title = line[len(TITLE_MARKER):].strip()
                break

        base = self.base_name(file_name)
        if not title:
            title = base

        m = DATE_PREFIX.match(base)
        date = m.group(1) if m else footer

        return PresentationMetadata(
            title=title,
            date=date,
            header=header,
            rendered_file_name=self.rendered_file_name(file_name),
        )

    def extract_document(self, doc: SourceDocument) -> PresentationMetadata:
        return self.extract(doc.path.name, doc.raw_content)
