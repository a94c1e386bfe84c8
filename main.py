"""Main CLI entry-point."""
from __future__ import annotations

import argparse
import asyncio
import sys

from core.logging import bootstrap_logging, shutdown_logging
from config import settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ddragon-sync",
        description="Load League of Legends Data Dragon static data into the document and blob stores.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sync = sub.add_parser("sync", help="load a version (latest by default) once")
    sync.add_argument("--version", default="", help="version to load, e.g. 14.1.1")

    sub.add_parser("versions", help="list stored versions and their flags")

    serve = sub.add_parser("serve", help="run the HTTP endpoint")
    serve.add_argument("--host", default=settings.API_HOST)
    serve.add_argument("--port", type=int, default=settings.API_PORT)

    sub.add_parser("scheduled", help="fire the daily scheduled hook")
    return parser


def main(argv: list[str]) -> int:
    args = _build_parser().parse_args(argv)
    bootstrap_logging(
        level=settings.LOG_LEVEL,
        log_dir=settings.LOG_DIR,
        log_file_name="sync.jsonl",
    )
    try:
        if args.command == "sync":
            from presentation.cli import SyncCommand
            return asyncio.run(SyncCommand(args.version).run())
        if args.command == "versions":
            from presentation.cli import VersionsCommand
            return asyncio.run(VersionsCommand().run())
        if args.command == "serve":
            import uvicorn
            from presentation.api import create_app
            settings.validate()
            settings.create_directories()
            uvicorn.run(create_app(), host=args.host, port=args.port)
            return 0
        if args.command == "scheduled":
            from presentation.scheduler import daily_sync_hook
            daily_sync_hook()
            return 0
        return 2
    finally:
        shutdown_logging()


def run() -> None:
    raise SystemExit(main(sys.argv[1:]))


if __name__ == "__main__":
    run()
