"""Command line entry point: `rsp run` and `rsp repl`.

Exit codes: 0 on success, 1 on a parse or evaluation error, 2 on usage
errors (from argparse).
"""

from __future__ import annotations

import argparse
import logging
import sys

from rsp import __version__
from rsp.diagnostics import configure_logging
from rsp.errors import RspError
from rsp.interpreter import Interpreter
from rsp.printer import to_lisp_string
from rsp.repl import start_repl

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rsp", description="A small Lisp interpreter.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--log-level", help="diagnostic log level (default: $RSP_LOG or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="evaluate an expression string or execute a Lisp file")
    source = run.add_mutually_exclusive_group(required=True)
    source.add_argument("-e", "--expr", metavar="LISP_CODE", help="expression(s) to evaluate")
    source.add_argument("file", nargs="?", metavar="FILE_PATH", help="Lisp file to execute")

    sub.add_parser("repl", help="start an interactive read-eval-print loop")
    return parser


def run_command(args: argparse.Namespace) -> int:
    itp = Interpreter()
    try:
        if args.expr is not None:
            result = itp.eval(args.expr)
        else:
            result = itp.run_file(args.file)
    except RspError as err:
        logger.debug("run failed", exc_info=err)
        print(f"Error: {err}", file=sys.stderr)
        return EXIT_ERROR
    print(to_lisp_string(result))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)
    logger.info("starting rsp %s", args.command)

    if args.command == "run":
        return run_command(args)
    start_repl()
    return EXIT_OK
