"""Command-line entry point: ``evntrepo [run] [options]`` and ``evntrepo check DIR``."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from evntrepo import __version__
from evntrepo.reporting.sink import GitHubActionsSink
from evntrepo.service.action import check_events, run_action
from evntrepo.settings import Settings


def _add_run_arguments(parser: argparse.ArgumentParser, *, suppress: bool = False) -> None:
    # Run options work before or after ``run``; the subcommand copy leaves
    # top-level values alone.
    default = argparse.SUPPRESS if suppress else None
    parser.add_argument("--events-path", default=default, help="Root directory of the event files.")
    parser.add_argument(
        "--index-path", type=Path, default=default, help="Where to write the index manifest."
    )
    parser.add_argument(
        "--no-index",
        action="store_true",
        default=argparse.SUPPRESS if suppress else False,
        help="Validate and write listings, but do not write the index manifest.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evntrepo",
        description="Validate event data files and publish the event index.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="Logging level (default: from settings, INFO).")
    _add_run_arguments(parser)
    sub = parser.add_subparsers(dest="command")

    run = sub.add_parser("run", help="Validate events and write listings and the index (default).")
    _add_run_arguments(run, suppress=True)

    check = sub.add_parser("check", help="Only validate the events under DIR.")
    check.add_argument("directory", type=Path)
    return parser


def _configure(args: argparse.Namespace) -> Settings:
    settings = Settings()
    if args.events_path:
        settings = settings.model_copy(update={"events_path": args.events_path})

    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("evntrepo").setLevel((args.log_level or settings.log_level).upper())
    return settings


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    sink = GitHubActionsSink()
    try:
        settings = _configure(args)
        logging.getLogger("evntrepo.cli").debug(
            "evntrepo v%s (command=%s)", __version__, args.command or "run"
        )
        if args.command == "check":
            asyncio.run(check_events(args.directory, sink))
        else:
            asyncio.run(
                run_action(
                    settings, sink, index_path=args.index_path, with_index=not args.no_index
                )
            )
    except Exception as exc:
        sink.set_failed(str(exc) or type(exc).__name__)
    return sink.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
