from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from deck_site.app_factory import create_app, make_build_service, make_verifier
from deck_site.config.ini_config import SiteSettings
from deck_site.domain.errors import DeckSiteError
from deck_site.domain.models import CheckResult, CheckStatus, VerificationReport

logger = logging.getLogger(__name__)

RULE = "─" * 50

_MARKS = {
    CheckStatus.PASS: "✓",
    CheckStatus.FAIL: "❌",
    CheckStatus.SKIP: "ℹ ",
}


def format_check(check: CheckResult) -> list[str]:
    suffix = " - FAIL" if check.failed else ""
    lines = [f"  {_MARKS[check.status]} {check.name}{suffix}"]
    lines += [f"     {d}" for d in check.details]
    return lines


def format_report(report: VerificationReport) -> list[str]:
    lines = ["Running smoke tests for build output...", ""]
    for section in report.sections():
        lines.append(f"Checking {section.lower()}:")
        for check in report.checks:
            if check.section == section:
                lines += format_check(check)
        lines.append("")

    lines.append(RULE)
    if report.ok:
        lines.append(f"✅ All smoke tests passed! ({report.passed} checks)")
    else:
        lines.append(f"❌ Smoke tests failed: {report.failed} issue(s) found, {report.passed} passed")
        if report.aborted:
            lines.append("   Output directory is missing; no further checks were run.")
    lines.append(RULE)
    return lines


def run_build(settings: SiteSettings, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    try:
        result = make_build_service(settings).build()
    except DeckSiteError as e:
        logger.error("Build failed: %s", e)
        return 1

    print(f"✓ Generated {result.index_path.name} with {result.deck_count} presentations", file=out)
    return 0


def run_verify(settings: SiteSettings, out: Optional[TextIO] = None) -> int:
    out = out or sys.stdout
    report = make_verifier(settings).verify()
    for line in format_report(report):
        print(line, file=out)
    return report.exit_code


def run_serve(settings: SiteSettings, host: str | None = None, port: int | None = None) -> int:
    app = create_app(settings)
    app.run(host=host or app.config["HOST"], port=port or app.config["PORT"], debug=app.config["DEBUG"])
    return 0
