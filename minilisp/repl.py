"""Interactive front end: read a line, evaluate it, print, loop."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Sequence, TextIO

from minilisp import __version__
from minilisp.config import get_log_level, get_prompt
from minilisp.errors import MiniLispError
from minilisp.interpreter import Interpreter
from minilisp.printer import render

try:
    import readline  # noqa: F401  (line editing and history for input())
except ImportError:
    readline = None

logger = logging.getLogger(__name__)


def run_line(interp: Interpreter, line: str, out: TextIO) -> None:
    """Evaluate every expression on `line`, printing each result or the first error."""
    try:
        for value in interp.iter_eval(line):
            print(render(value), file=out)
    except MiniLispError as e:
        print(f"error: {e}", file=out)


def repl(
    interp: Interpreter,
    read_line: Callable[[str], str] | None = None,
    out: TextIO | None = None,
) -> int:
    read_line = read_line or input
    out = out or sys.stdout
    print(f"minilisp version {__version__}", file=out)
    print("Press Ctrl-D to exit.", file=out)
    prompt = get_prompt()
    while True:
        try:
            line = read_line(prompt)
        except (EOFError, KeyboardInterrupt):
            print("\nbye!", file=out)
            return 0
        if not line.strip():
            continue
        try:
            run_line(interp, line, out)
        except RecursionError as e:
            # EvaluationDepthExceeded, or unbounded nesting in the reader or printer
            logger.error("Fatal: %s", e)
            print(f"fatal: {e}", file=out)
            return 1


def run_files(interp: Interpreter, paths: Sequence[Path], out: TextIO | None = None) -> int:
    out = out or sys.stdout
    for path in paths:
        logger.info("Running %s", path)
        try:
            interp.eval(path.read_text())
        except OSError as e:
            print(f"{path}: {e.strerror}", file=out)
            return 1
        except MiniLispError as e:
            print(f"{path}: error: {e}", file=out)
            return 1
        except RecursionError as e:
            logger.error("Fatal: %s", e)
            print(f"{path}: fatal: {e}", file=out)
            return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp", description="A minimal S-expression evaluator.")
    parser.add_argument("files", nargs="*", type=Path, help="source files to run instead of the REPL")
    args = parser.parse_args(argv)

    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    interp = Interpreter()
    if args.files:
        return run_files(interp, args.files)
    return repl(interp)


if __name__ == "__main__":
    sys.exit(main())
