"""Result containers for form parsing and validation.

``Some``/``Nothing`` carry a parsed form value that may be missing,
``Right``/``Left`` carry a validated record or the error dict explaining why
the form was rejected.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Some(Generic[T]):
    value: T

    def map(self, f: Callable[[T], U]) -> 'Maybe[U]':
        return Some(f(self.value))

    def bind(self, f: Callable[[T], 'Maybe[U]']) -> 'Maybe[U]':
        return f(self.value)

    def get_or_else(self, default: T) -> T:
        return self.value

    def is_none(self) -> bool:
        return False


@dataclass(frozen=True)
class Nothing:

    def map(self, f: Callable) -> 'Nothing':
        return self

    def bind(self, f: Callable) -> 'Nothing':
        return self

    def get_or_else(self, default: T) -> T:
        return default

    def is_none(self) -> bool:
        return True


Maybe = Union[Some[T], Nothing]


@dataclass(frozen=True)
class Right(Generic[T]):
    value: T

    def get_or_else(self, default: T) -> T:
        return self.value

    def is_left(self) -> bool:
        return False

    def get_error(self) -> Any:
        raise ValueError("Right holds a value, not an error")


@dataclass(frozen=True)
class Left:
    error: dict

    def get_or_else(self, default: T) -> T:
        return default

    def is_left(self) -> bool:
        return True

    def get_error(self) -> dict:
        return self.error


Either = Union[Left, Right[T]]


def pipe(x, *funcs):
    """Pipe a value through a series of functions.

    pipe(x, f, g, h) == h(g(f(x)))
    """
    res = x
    for f in funcs:
        res = f(res)
    return res
