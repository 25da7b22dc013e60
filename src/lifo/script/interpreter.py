import sys
from collections.abc import Iterable, Iterator
from typing import Optional

from lifo.script.parser import (
    Assertion,
    Instruction,
    Push,
    Query,
    QueryKind,
    format_result,
)
from lifo.user_facing_errors import FailedAssertion
from lifo.utils.stack import Stack


class ScriptInterpreter:
    def __init__(self, stack: Optional[Stack[int]] = None, verbose: bool = False):
        self.stack: Stack[int] = Stack() if stack is None else stack
        self.verbose = verbose

    def query(self, kind: QueryKind) -> int | bool | None:
        match kind:
            case QueryKind.POP:
                return self.stack.pop()
            case QueryKind.PEEK:
                return self.stack.peek()
            case QueryKind.COUNT:
                return self.stack.count
            case QueryKind.EMPTY:
                return self.stack.is_empty

    def execute(self, instruction: Instruction) -> Optional[str]:
        if self.verbose:
            print(f"{instruction.line}: {instruction}", file=sys.stderr)

        match instruction:
            case Push(values=values):
                for value in values:
                    self.stack.push(value)
                return None

            case Query(kind=kind):
                return format_result(self.query(kind))

            case Assertion(line=line, kind=kind, expected=expected):
                # Compared as rendered, `count == true` never matches.
                actual = format_result(self.query(kind))
                if actual != format_result(expected):
                    raise FailedAssertion(
                        kind.value, format_result(expected), actual, line
                    )
                return None

        assert False, f"unknown instruction {instruction!r}"

    def run(self, program: Iterable[Instruction]) -> Iterator[str]:
        for instruction in program:
            output = self.execute(instruction)
            if output is not None:
                yield output
