"""Result objects for (value, error) pairs (like Rust's Result<T, E>)."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass
class Ok(Generic[T]):
    """Success result."""

    value: T


@dataclass
class Err:
    """Error result."""

    error: Any


Result = Ok[T] | Err


def from_pair(value: T, err: Any = None) -> Result[T]:
    """Build Err(err) when err is set, Ok(value) otherwise."""
    if err is not None:
        return Err(err)
    return Ok(value)


def to_pair(result: Result[T]) -> tuple[T | None, Any]:
    """Turn a Result back into a (value, error) pair."""
    match result:
        case Ok(value=value):
            return value, None
        case Err(error=error):
            return None, error
    raise TypeError(f"not a Result: {result!r}")
