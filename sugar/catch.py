"""Catch aborts and hand them back as (value, error) pairs.

This is the inverse of must(): code that fails by raising gets wrapped at
a single boundary so callers can use plain pair handling instead.
"""

import typing
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from sugar.errors import PanicError, ZeroValueError
from sugar.zero import zero

T = TypeVar("T")

Pair = tuple[T | None, PanicError | None]


def _return_type(f: Callable[..., Any]) -> Any:
    try:
        hints = typing.get_type_hints(f)
    except (AttributeError, NameError, TypeError):
        return None
    return hints.get("return")


def _fallback(f: Callable[..., Any], tp: Any) -> Any:
    """Zero value to return in place of f's result."""
    if tp is not None:
        return zero(tp)

    annotated = _return_type(f)
    if annotated is None:
        return None
    try:
        return zero(annotated)
    except ZeroValueError:
        return None


def catch(f: Callable[[], T], tp: type[T] | None = None) -> Pair[T]:
    """Call f and convert any exception it raises into a returned error.

    Args:
        f: Zero-argument callable to run
        tp: Result type, used for the zero value on failure. Defaults to
            f's return annotation, then None.

    Returns:
        (result, None) on success, (zero value, PanicError) on failure.
        The error's message is "panic: <payload>".

    Raises:
        ZeroValueError: tp was given but has no zero value

    Only Exception subclasses are caught; KeyboardInterrupt, SystemExit and
    friends still propagate.
    """
    try:
        return f(), None
    except Exception as e:
        return _fallback(f, tp), PanicError.from_exception(e)


async def catch_async(f: Callable[[], Awaitable[T]], tp: type[T] | None = None) -> Pair[T]:
    """Await f() with the same semantics as catch().

    Cancellation is a BaseException and is never intercepted.
    """
    try:
        return await f(), None
    except Exception as e:
        return _fallback(f, tp), PanicError.from_exception(e)
