######## models.py
########

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator


@dataclass(frozen=True)
class SourceDocument:
    path: Path
    raw_content: str


@dataclass(frozen=True)
class PresentationMetadata:
    title: str
    date: str                   # display value, may be "" or free text
    header: str                 # venue label, may be ""
    rendered_file_name: str


@dataclass(frozen=True)
class Manifest:
    entries: tuple[PresentationMetadata, ...] = ()

    def __iter__(self) -> Iterator[PresentationMetadata]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class BuildResult:
    index_path: Path
    deck_count: int
    favicon_copied: bool


class CheckStatus(str, Enum):
    PASS = "pass"
    FAIL = "fail"
    SKIP = "skip"


@dataclass(frozen=True)
class CheckResult:
    section: str
    name: str
    status: CheckStatus
    details: tuple[str, ...] = ()

    @property
    def passed(self) -> bool:
        return self.status is CheckStatus.PASS

    @property
    def failed(self) -> bool:
        return self.status is CheckStatus.FAIL


@dataclass(frozen=True)
class VerificationReport:
    checks: tuple[CheckResult, ...] = field(default_factory=tuple)
    aborted: bool = False       # output directory missing, nothing else checked

    @property
    def passed(self) -> int:
        return sum(1 for c in self.checks if c.passed)

    @property
    def failed(self) -> int:
        return sum(1 for c in self.checks if c.failed)

    @property
    def ok(self) -> bool:
        return self.failed == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1

    def sections(self) -> list[str]:
        seen: list[str] = []
        for c in self.checks:
            if c.section not in seen:
                seen.append(c.section)
        return seen

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "aborted": self.aborted,
            "passed": self.passed,
            "failed": self.failed,
            "checks": [
                {
                    "section": c.section,
                    "name": c.name,
                    "status": c.status.value,
                    "details": list(c.details),
                }
                for c in self.checks
            ],
        }
