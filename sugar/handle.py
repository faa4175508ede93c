"""Build (value, error) unwrappers around a caller-supplied error handler."""

from collections.abc import Callable
from typing import Any, TypeVar

from sugar.errors import UnsetHandlerError, panic

T = TypeVar("T")

# Takes the error; returns None when it is dealt with, or the error to raise
Handler = Callable[[Any], Any]


def handle(handler: Handler | None) -> Callable[[T, Any], T]:
    """Create a function that unwraps (value, error) pairs through handler.

    The returned function takes (value, err=None):
      - err is None: value is returned and handler is not called
      - handler(err) returns None: the error is resolved, value is returned
      - handler(err) returns an error: that error is raised

    Common shapes (see sugar.handlers for ready-made ones):

        strict = handle(lambda err: err)      # same as must()
        lenient = handle(lambda err: None)    # swallow everything
        rewrite = handle(lambda err: RuntimeError(f"setup failed: {err}"))

    A None handler is accepted here but applying the result to an error
    raises UnsetHandlerError.
    """

    def apply(value: T, err: Any = None) -> T:
        if err is None:
            return value
        if handler is None:
            raise UnsetHandlerError("error handler is not set") from (
                err if isinstance(err, BaseException) else None
            )
        resolved = handler(err)
        if resolved is not None:
            panic(resolved)
        return value

    return apply
