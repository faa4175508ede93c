"""Exceptions and the abort primitive shared by every sugar helper.

An abort is a raised exception. Payloads that are not exceptions travel
inside `Panic` so that anything can be aborted with, the way `panic()`
accepts any value.
"""

from typing import Any, NoReturn

# Text used when an abort carries no payload at all
NIL_PAYLOAD_MESSAGE = "panic called with None payload"


def describe(payload: Any) -> str:
    """Stringify an abort payload.

    Exceptions render as their message (or class name when the message is
    empty), None renders as NIL_PAYLOAD_MESSAGE, anything else via str().
    """
    if payload is None:
        return NIL_PAYLOAD_MESSAGE
    if isinstance(payload, BaseException):
        return str(payload) or type(payload).__name__
    return str(payload)


class Panic(Exception):  # noqa: N818
    """Abort carrying a payload that is not itself an exception."""

    def __init__(self, payload: Any = None):
        super().__init__(describe(payload))
        self.payload = payload


class PanicError(Exception):
    """Error value synthesized when an abort is caught.

    str() is always "panic: <payload>". The intercepted exception is kept
    on __cause__.
    """

    def __init__(self, payload: Any = None):
        super().__init__(f"panic: {describe(payload)}")
        self.payload = payload

    @classmethod
    def from_exception(cls, exc: Exception) -> "PanicError":
        payload = exc.payload if isinstance(exc, Panic) else exc
        err = cls(payload)
        err.__cause__ = exc
        return err


class WrappedError(Exception):
    """Error rewritten with extra context."""

    def __init__(self, message: str, error: Any):
        super().__init__(f"{message}: {error}")
        self.error = error
        if isinstance(error, BaseException):
            self.__cause__ = error


class UnsetHandlerError(TypeError):
    """A handle() function was applied to an error without a handler."""


class ZeroValueError(TypeError):
    """The type has no default value."""

    def __init__(self, tp: Any, reason: str = "not default-constructible"):
        super().__init__(f"no zero value for {tp!r}: {reason}")
        self.tp = tp


def panic(payload: Any = None) -> NoReturn:
    """Abort with payload.

    Exceptions are raised as-is so callers see the very same object;
    other payloads are wrapped in Panic.
    """
    if isinstance(payload, BaseException):
        raise payload
    raise Panic(payload)
