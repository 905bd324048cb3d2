#!/usr/bin/env python3
"""umasync – keep umamusu.wiki templates in sync with master.mdb.

Usage:
    umasync character 1006      sync character id 1006
    umasync character all       sync every character page
    umasync --dry-run race all  show the diffs, edit nothing
    umasync objectives          regenerate Module:ObjectiveData

Exit status: 0 on success, 1 when one or more records failed, 2 when the run
could not start (bad arguments, missing database or credentials, login
failure, unreadable page index or record list).
"""

import argparse
import logging
import sqlite3

import mwclient
import requests
from dotenv import find_dotenv, load_dotenv

from umasync import log
from umasync.batch import run_all, run_one
from umasync.config import DEFAULT_DB_FILE, Config
from umasync.context import RunContext
from umasync.database import MasterDatabase
from umasync.errors import SyncError
from umasync.kinds import KINDS
from umasync.kinds.objectives import sync_objectives
from umasync.page_index import PageIndex
from umasync.wiki import WikiClient

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_FATAL = 2

STARTUP_ERRORS = (
    SyncError,
    OSError,
    sqlite3.Error,
    mwclient.errors.MwClientError,
    requests.RequestException,
)


def record_id(value):
    if value == "all":
        return value
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a numeric id or 'all', got {value!r}")


def add_global_options(parser, suppress=False):
    # Subparsers repeat these with SUPPRESS so the flags work on either side
    # of the command name.
    def d(value):
        return argparse.SUPPRESS if suppress else value

    parser.add_argument("--dry-run", action="store_true", default=d(False),
                        help="Run without doing any updates")
    parser.add_argument("-f", "--file", default=d(DEFAULT_DB_FILE),
                        help=f"Path to master.mdb file (default: {DEFAULT_DB_FILE})")
    parser.add_argument("-q", "--quiet", action="store_true", default=d(False),
                        help="Sets log level to error")
    parser.add_argument("-v", "--verbose", action="store_true", default=d(False),
                        help="Sets log level to verbose")
    parser.add_argument("--debug", action="store_true", default=d(False),
                        help="Sets log level to debug")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="umasync",
        description="Synchronize wiki pages with master.mdb",
        epilog=__doc__.split("\n\n", 1)[1],
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    add_global_options(parser)
    common = argparse.ArgumentParser(add_help=False)
    add_global_options(common, suppress=True)

    sub = parser.add_subparsers(dest="command", metavar="<command>")
    sub.required = True
    for kind in KINDS.values():
        p = sub.add_parser(
            kind.name,
            aliases=list(kind.aliases),
            parents=[common],
            help=f"Sync {{{{{kind.template}}}}} on {kind.label} pages",
        )
        p.add_argument("id", type=record_id,
                       help=f"Specific {kind.label} id to update, or 'all'")
        p.set_defaults(kind=kind)

    p = sub.add_parser("objectives", aliases=["o"], parents=[common],
                       help="Regenerate Module:ObjectiveData")
    p.set_defaults(kind=None)
    return parser


def run(ctx, args):
    """Dispatch a parsed command against an opened context.

    ``ctx.page_index`` must already be filled in for template kinds.
    """
    if args.kind is None:
        try:
            sync_objectives(ctx)
        except Exception as e:
            logger.error(f"Failed to synchronize objectives: {e}")
            logger.debug("", exc_info=True)
            return EXIT_FAILED
        return EXIT_OK

    kind = args.kind
    if args.id == "all":
        # Per-record errors are caught inside run_all; anything reaching
        # here means the record list itself could not be read.
        try:
            report = run_all(ctx, kind)
        except Exception as e:
            logger.critical(f"Failed to read {kind.label} records: {e}")
            logger.debug("", exc_info=True)
            return EXIT_FATAL
        return EXIT_FAILED if report.failures else EXIT_OK

    try:
        run_one(ctx, kind, args.id)
    except Exception as e:
        logger.error(f"Failed to synchronize {kind.label} id {args.id}: {e}")
        logger.debug("", exc_info=True)
        return EXIT_FAILED
    return EXIT_OK


def open_context(args):
    config = Config.from_env(require_credentials=not args.dry_run)
    db = MasterDatabase.open(args.file)
    wiki = WikiClient.connect(config)
    return RunContext(db=db, wiki=wiki, dry_run=args.dry_run)


def main(argv=None):
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    log.setup(log.level_from_flags(args.quiet, args.verbose, args.debug))

    try:
        ctx = open_context(args)
    except STARTUP_ERRORS as e:
        logger.critical(str(e))
        return EXIT_FATAL

    try:
        if args.kind is not None:
            ctx.page_index = PageIndex.fetch(ctx.wiki, args.kind.cargo_table)
    except STARTUP_ERRORS as e:
        logger.critical(str(e))
        ctx.db.close()
        return EXIT_FATAL

    try:
        return run(ctx, args)
    finally:
        ctx.db.close()


if __name__ == "__main__":
    raise SystemExit(main())
