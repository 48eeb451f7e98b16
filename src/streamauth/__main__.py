from __future__ import annotations

import argparse
import logging
from dataclasses import replace

from .core.config import LOG_LEVELS, Settings
from .runtime.server import serve


def build_parser(defaults: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="streamauth", description="streamauth: stream key -> manifest id auth service")
    p.add_argument("--host", default=defaults.host)
    p.add_argument("--port", type=int, default=defaults.port)
    p.add_argument("--log-level", default=defaults.log_level, choices=LOG_LEVELS)
    p.add_argument("--access-log", action="store_true", default=defaults.access_log)
    return p


def main(argv: list[str] | None = None) -> None:
    defaults = Settings.from_env()
    args = build_parser(defaults).parse_args(argv)
    settings = replace(
        defaults,
        host=args.host,
        port=args.port,
        log_level=str(args.log_level).lower(),
        access_log=bool(args.access_log),
    )

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    serve(settings)


if __name__ == "__main__":
    main()
