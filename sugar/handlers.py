"""Ready-made error handlers for handle()."""

from collections.abc import Callable
from typing import Any

import structlog

from sugar.errors import WrappedError
from sugar.handle import Handler
from sugar.logging_config import get_logger


def strict(err: Any) -> Any:
    """Echo the error back, so handle(strict) behaves like must()."""
    return err


def ignore(err: Any) -> None:
    """Treat every error as resolved."""
    return None


def suppress(*types: type[BaseException]) -> Handler:
    """Resolve errors of the given types, pass everything else through."""

    def handler(err: Any) -> Any:
        if isinstance(err, types):
            return None
        return err

    return handler


def wrap(message: str) -> Handler:
    """Rewrite errors as WrappedError("<message>: <err>")."""

    def handler(err: Any) -> WrappedError:
        return WrappedError(message, err)

    return handler


def log(
    logger: structlog.stdlib.BoundLogger | None = None,
    *,
    suppress: bool = False,
    event: str = "error handled",
) -> Handler:
    """Log the error, then resolve it (suppress=True) or pass it through.

    Args:
        logger: structlog logger to use (default: "sugar.handlers")
        suppress: Resolve the error after logging instead of re-raising it
        event: Log event name
    """
    log_ = logger or get_logger("sugar.handlers")

    def handler(err: Any) -> Any:
        fields = {"error_type": type(err).__name__, "error": str(err), "suppressed": suppress}
        if suppress:
            log_.warning(event, **fields)
            return None
        log_.error(event, **fields)
        return err

    return handler


def chain(*handlers: Callable[[Any], Any]) -> Handler:
    """Run handlers left to right until one resolves the error.

    Each handler sees the error returned by the previous one.
    """

    def handler(err: Any) -> Any:
        for h in handlers:
            err = h(err)
            if err is None:
                return None
        return err

    return handler
