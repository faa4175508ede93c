"""Turn a (value, error) pair into "value or raise"."""

from typing import Any, TypeVar

from sugar.errors import panic

T = TypeVar("T")


def must(value: T, err: Any = None) -> T:
    """Return value, or raise err if it is set.

    Meant for places where a failure can't be recovered from locally, like
    startup or fatal setup:

        config = must(*load_config("app.toml"))
        port = must(*parse_port(os.environ["PORT"]))

    Args:
        value: Value to hand back when there is no error
        err: Error half of the pair; None means success

    Returns:
        value, unchanged

    Raises:
        err itself when it is an exception, Panic(err) otherwise
    """
    if err is not None:
        panic(err)
    return value
