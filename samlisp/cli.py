"""
samlisp command line entry point.

  samlisp repl              # interactive read-eval-print loop
  samlisp run script.sl     # evaluate a file, print the last value
  samlisp --debug ...       # debug logging, print the tree of failing forms
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

from samlisp import config
from samlisp.debug_utils.pprint import pprint_expr
from samlisp.errors import EvalError, ParseError
from samlisp.interpreter import Interpreter
from samlisp.reader.parser import read_all
from samlisp.types.value import render

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EVAL_ERROR = 1
EXIT_PARSE_ERROR = 2
EXIT_STACK_EXHAUSTED = 3

STACK_EXHAUSTED_MSG = "host stack exhausted (unbounded recursion?)"


def create_arg_parser() -> argparse.ArgumentParser:
    """Create command line argument parser"""
    parser = argparse.ArgumentParser(
        prog="samlisp",
        description="A minimal Lisp-like expression interpreter",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging and print the expression tree of failing forms",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("repl", help="Start an interactive session")
    run = sub.add_parser("run", help="Evaluate a script file")
    run.add_argument("path", help="Script file to evaluate")
    return parser


def configure(debug: bool) -> None:
    level = logging.DEBUG if debug else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    limit = config.get_recursion_limit()
    if limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)
    logger.debug("recursion limit %d", sys.getrecursionlimit())


def repl(
    read_line: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
    debug: bool = False,
    interp: Optional[Interpreter] = None,
) -> int:
    """Read lines until EOF; each line is parsed and evaluated in one session."""
    out = out or sys.stdout
    interp = interp or Interpreter()
    prompt = config.get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except EOFError:
            out.write("\n")
            return EXIT_OK
        try:
            forms = read_all(line)
        except ParseError as ex:
            out.write(f"parse error: {ex}\n")
            continue
        except RecursionError:
            # nesting deeper than the reader can follow
            out.write(f"parse error: {STACK_EXHAUSTED_MSG}\n")
            continue
        for expr in forms:
            try:
                result = interp.eval_expr(expr)
            except EvalError as ex:
                out.write(f"error: {ex}\n")
                if debug:
                    out.write(f"  tree: {pprint_expr(expr, indent=4)}\n")
                break
            except RecursionError:
                out.write(f"error: {STACK_EXHAUSTED_MSG}\n")
                break
            out.write(f"{render(result)}\n")


def run_file(
    path: str,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
    debug: bool = False,
) -> int:
    """Evaluate every form of a script; print the value of the last one."""
    out = out or sys.stdout
    err = err or sys.stderr
    try:
        with open(path, encoding="utf-8") as fh:
            source = fh.read()
    except OSError as ex:
        err.write(f"cannot read {path}: {ex.strerror}\n")
        return EXIT_EVAL_ERROR
    except UnicodeDecodeError as ex:
        err.write(f"cannot read {path}: not valid UTF-8 ({ex.reason} at byte {ex.start})\n")
        return EXIT_EVAL_ERROR

    try:
        forms = read_all(source)
    except ParseError as ex:
        err.write(f"{path}: parse error: {ex}\n")
        return EXIT_PARSE_ERROR
    except RecursionError:
        err.write(f"{path}: parse error: {STACK_EXHAUSTED_MSG}\n")
        return EXIT_STACK_EXHAUSTED

    interp = Interpreter()
    result = None
    for expr in forms:
        try:
            result = interp.eval_expr(expr)
        except EvalError as ex:
            err.write(f"{path}: error: {ex}\n")
            if debug:
                err.write(f"  tree: {pprint_expr(expr, indent=4)}\n")
            return EXIT_EVAL_ERROR
        except RecursionError:
            err.write(f"{path}: error: {STACK_EXHAUSTED_MSG}\n")
            return EXIT_STACK_EXHAUSTED
    if result is not None:
        out.write(f"{render(result)}\n")
    return EXIT_OK


def main(argv: Optional[list[str]] = None) -> int:
    args = create_arg_parser().parse_args(argv)
    configure(args.debug)
    if args.command == "run":
        return run_file(args.path, debug=args.debug)
    return repl(debug=args.debug)


if __name__ == "__main__":
    sys.exit(main())
