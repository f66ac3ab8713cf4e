from __future__ import annotations

import argparse
import logging

from .bootstrap import configure_logging
from .config import get_settings


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Calgrid personal calendar.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gui_parser = subparsers.add_parser("gui", help="Launch the desktop calendar.")
    gui_parser.add_argument("--api-url", default=None, help="Calendar server to sync with (default: CALGRID_API_URL).")

    api_parser = subparsers.add_parser("api", help="Start the calendar HTTP API.")
    api_parser.add_argument("--host", default=settings.api.host)
    api_parser.add_argument("--port", type=int, default=settings.api.port)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    logging.getLogger(__name__).info("Calgrid CLI starting")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "gui":
        from .ui.app import run_gui

        run_gui(api_url=args.api_url)
    elif args.command == "api":
        from .services.http import run_local_server

        run_local_server(host=args.host, port=args.port)

if __name__ == "__main__":
    main()
