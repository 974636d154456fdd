from __future__ import annotations

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="deck-site",
        description="Build the presentations landing page and smoke-test the output directory.",
    )
    parser.add_argument("--config", type=Path, default=None, help="INI file (default: $DECK_SITE_INI or deck_site.ini)")
    parser.add_argument("--log-level", default=None, help="Override [logging] level from the INI")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("build", help="Generate the landing page and copy the favicon")
    sub.add_parser("verify", help="Run the smoke test against the output directory")
    serve = sub.add_parser("serve", help="Serve the output directory with Flask")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)
    return parser
