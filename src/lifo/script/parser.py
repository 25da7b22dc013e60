from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from lark import (
    Lark,
    Token,
    Transformer,
    UnexpectedCharacters,
    UnexpectedInput,
    UnexpectedToken,
    v_args,
)
from lark.tree import Meta

from lifo.user_facing_errors import FileDoesNotExistException, InvalidSyntax

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Global; only ever make one parser
lark_instance = Lark.open(
    str(GRAMMAR_PATH),
    parser="lalr",
    propagate_positions=True,
)


def format_result(value: int | bool | None) -> str:
    match value:
        case None:
            return "none"
        case bool():
            return "true" if value else "false"
        case _:
            return str(value)


class QueryKind(Enum):
    POP = "pop"
    PEEK = "peek"
    COUNT = "count"
    EMPTY = "empty"


@dataclass(frozen=True)
class Instruction:
    line: int


@dataclass(frozen=True)
class Push(Instruction):
    values: tuple[int, ...]

    def __str__(self) -> str:
        return "push " + " ".join(map(str, self.values))


@dataclass(frozen=True)
class Query(Instruction):
    kind: QueryKind

    def __str__(self) -> str:
        return self.kind.value


@dataclass(frozen=True)
class Assertion(Instruction):
    kind: QueryKind
    expected: int | bool | None

    def __str__(self) -> str:
        return f"assert {self.kind.value} == {format_result(self.expected)}"


@v_args(inline=True)
class InstructionBuilder(Transformer):
    def start(self, *instructions: Instruction) -> list[Instruction]:
        return list(instructions)

    @v_args(meta=True, inline=True)
    def push(self, meta: Meta, *values: Token) -> Push:
        return Push(meta.line, tuple(int(value) for value in values))

    @v_args(meta=True, inline=True)
    def query(self, meta: Meta, kind: Token) -> Query:
        return Query(meta.line, QueryKind(kind.value))

    @v_args(meta=True, inline=True)
    def assertion(
        self, meta: Meta, kind: Token, expected: int | bool | None
    ) -> Assertion:
        return Assertion(meta.line, QueryKind(kind.value), expected)

    def integer(self, value: Token) -> int:
        return int(value)

    def none(self) -> None:
        return None

    def true(self) -> bool:
        return True

    def false(self) -> bool:
        return False


def describe_unexpected_input(exc: UnexpectedInput) -> str:
    if isinstance(exc, UnexpectedCharacters):
        return f"unexpected character '{exc.char}'"

    if isinstance(exc, UnexpectedToken):
        match exc.token.type:
            case "_NL" | "$END":
                return "unexpected end of line"
            case _:
                return f"unexpected '{exc.token}'"

    return "unexpected end of input"


def parse_and_wrap_errors(lark: Lark, source: str) -> list[Instruction]:
    # Each statement needs a terminating newline, including the last one.
    source += "\n"

    try:
        tree = lark.parse(source)
    except UnexpectedInput as exc:
        error_pos = exc.pos_in_stream
        if not isinstance(error_pos, int) or error_pos < 0:
            error_pos = len(source) - 1

        this_line_start_pos = source.rfind("\n", 0, error_pos)
        this_line_end_pos = source.find("\n", error_pos)
        if this_line_end_pos == -1:
            this_line_end_pos = len(source)

        line_number = source.count("\n", 0, this_line_start_pos + 1) + 1
        error_message_context = [
            source[this_line_start_pos + 1 : this_line_end_pos].rstrip("\r")
        ]

        caret_pos = error_pos - this_line_start_pos - 1
        error_message_context.append(caret_pos * " " + "^")

        raise InvalidSyntax(
            error_message_context, line_number, describe_unexpected_input(exc)
        ) from exc

    return InstructionBuilder().transform(tree)


def parse_source(source: str) -> list[Instruction]:
    return parse_and_wrap_errors(lark_instance, source)


def parse_file(path: Path) -> list[Instruction]:
    if not path.is_file():
        raise FileDoesNotExistException(str(path))

    with path.open(encoding="utf-8") as source_file:
        return parse_source(source_file.read())
