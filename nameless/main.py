"""Runs the call-by-value lambda calculus interpreter on a file, a single expression, or in command-line mode. Also uses
error handling context manager. Called from the nameless executable script.

Python version must be >=3.7, because error handling requires that dicts are insertion-ordered and terms are
dataclasses.
"""

import argparse
import sys

from nameless.lang.error import ErrorHandler
from nameless.lang.session import Session
from nameless.lang.shell import Shell
from nameless.pure.reducer import run


def main(argv=None):
    """Runs the interpreter. Called from the nameless executable script."""
    assert sys.version_info >= (3, 7), "nameless cannot be run with python < 3.7"

    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="nameless")
        parser.add_argument("file", help="file to interpret and run (if empty, goes to command-line mode)", nargs="?")
        parser.add_argument("-e", "--expr", help="evaluate a single expression with no named definitions and exit")
        parser.add_argument("--max-steps", type=int, default=None, metavar="N",
                            help="give up on a line after N β-reductions (default: no limit)")
        parser.add_argument("--trace", action="store_true", help="print every β-reduction")
        args = parser.parse_args(argv)

        error_handler.trace = args.trace

        if args.expr is not None:
            error_handler.register_file("<expr>")
            error_handler.register_line("<expr>", args.expr, 1)
            tracer = error_handler if args.trace else None
            print(run({}, args.expr, args.max_steps, tracer))

        elif args.file is not None:
            Session(error_handler, args.file, cmd_line=False, max_steps=args.max_steps)  # prints each result

        else:
            Shell(Session(error_handler, Session.SH_FILE, cmd_line=True, max_steps=args.max_steps)).cmdloop()


if __name__ == "__main__":
    main()
