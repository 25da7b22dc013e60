from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SourceLocation:
    line: int
    file: str

    def __str__(self) -> str:
        return f"File '{self.file}', line {self.line}"


class LifoError(ValueError):
    def __init__(self, message: str) -> None:
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)


class ErrorWithLineInfo(ValueError):
    def __init__(self, message: str, line: int, context: Optional[str] = None) -> None:
        super().__init__(message)

        self.line = line
        self.context = context

    @property
    def message(self) -> str:
        return str(self)


class ErrorWithLocationInfo(ValueError):
    def __init__(
        self, message: str, location: SourceLocation, context: Optional[str] = None
    ) -> None:
        super().__init__(message)

        self.loc = location
        self.context = context

    @property
    def message(self) -> str:
        return str(self)


class FileDoesNotExistException(LifoError):
    def __init__(self, file_name: str) -> None:
        super().__init__(f"Error: file '{file_name}' does not exist")


class InvalidSyntax(ErrorWithLineInfo):
    def __init__(
        self, context_lines: list[str], line_number: int, hint: str = ""
    ) -> None:
        message = "\n    ".join(context_lines)
        message += f"\n    Error: invalid syntax, {hint}"
        super().__init__(message, line_number)


class FailedAssertion(ErrorWithLineInfo):
    def __init__(self, query: str, expected: str, actual: str, line: int) -> None:
        super().__init__(
            f"Error: expected `{query}` to be `{expected}` but got `{actual}`",
            line,
            f"assert {query}",
        )
