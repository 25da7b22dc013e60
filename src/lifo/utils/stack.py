from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """Last-in-first-out container.

    `pop()` and `peek()` return None on an empty stack instead of raising;
    callers storing None themselves should consult `is_empty` first.
    """

    def __init__(self) -> None:
        self._lst: list[T] = []

    def push(self, value: T) -> None:
        self._lst.append(value)

    def pop(self) -> T | None:
        if self._lst:
            return self._lst.pop()
        return None

    def peek(self) -> T | None:
        if self._lst:
            return self._lst[-1]
        return None

    @property
    def is_empty(self) -> bool:
        return not self._lst

    @property
    def count(self) -> int:
        return len(self._lst)

    def __repr__(self) -> str:
        return f"Stack(count={self.count})"
