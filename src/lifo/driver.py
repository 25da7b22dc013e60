import sys
import traceback
from pathlib import Path
from typing import NoReturn, Optional

from tap import Tap

from lifo.script.interpreter import ScriptInterpreter
from lifo.script.parser import parse_file
from lifo.user_facing_errors import (
    ErrorWithLineInfo,
    ErrorWithLocationInfo,
    LifoError,
    SourceLocation,
)
from lifo.utils.stack import Stack


class DriverArguments(Tap):
    inputs: list[Path]

    verbose: bool = False
    """Print each instruction to stderr before executing it."""

    debug_interpreter: bool = False
    """Print full exception traces."""

    shared_stack: bool = False
    """Run every input against the same stack instead of a fresh one per file."""

    def __init__(self):
        super().__init__(underscores_to_dashes=True)

    def configure(self) -> None:
        self.add_argument("inputs")
        self.add_argument("-v", "--verbose")

    def process_args(self) -> None:
        if not self.inputs:
            self.error("at least one input file is required")


def run_script(path: Path, interpreter: ScriptInterpreter) -> None:
    try:
        program = parse_file(path)
        for output in interpreter.run(program):
            print(output, flush=True)
    except ErrorWithLineInfo as exc:
        location = SourceLocation(exc.line, str(path))
        raise ErrorWithLocationInfo(exc.message, location, exc.context) from exc


def report_and_exit(exc: LifoError | ErrorWithLocationInfo, debug: bool) -> NoReturn:
    if debug:
        traceback.print_exc(file=sys.stderr)
        print("~~~ User-facing error message ~~~", file=sys.stderr)

    if isinstance(exc, ErrorWithLocationInfo):
        context = f", in '{exc.context}'" if exc.context else ""
        print(f"{exc.loc}{context}", file=sys.stderr)
        print(f"    {exc.message}", file=sys.stderr)
    else:
        print(exc.message, file=sys.stderr)

    sys.exit(1)


def main(argv: Optional[list[str]] = None) -> None:
    args = DriverArguments().parse_args(argv)

    shared_stack: Optional[Stack[int]] = Stack() if args.shared_stack else None

    try:
        for path in args.inputs:
            run_script(path, ScriptInterpreter(shared_stack, args.verbose))
    except (LifoError, ErrorWithLocationInfo) as exc:
        report_and_exit(exc, args.debug_interpreter)


if __name__ == "__main__":
    main()
