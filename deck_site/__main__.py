from __future__ import annotations

import logging
import sys
from configparser import Error as ConfigParserError
from typing import Optional, Sequence

from deck_site.cli.args import build_parser
from deck_site.cli.controller import run_build, run_serve, run_verify
from deck_site.config.ini_config import IniConfig
from deck_site.log_setup import setup_logging

logger = logging.getLogger("deck_site")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = IniConfig.from_env_or_default(args.config).load_settings()
    except (OSError, ValueError, ConfigParserError) as e:
        setup_logging(args.log_level or "INFO")
        logger.error("Configuration error: %s", e)
        return 1

    setup_logging(args.log_level or settings.log_level)

    if args.command == "build":
        return run_build(settings)
    if args.command == "verify":
        return run_verify(settings)
    return run_serve(settings, host=args.host, port=args.port)


if __name__ == "__main__":
    sys.exit(main())
