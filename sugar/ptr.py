"""References to private copies of values."""

import copy
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Ref(Generic[T]):
    """Mutable box around a single value."""

    value: T


def _private_copy(value: T) -> T:
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        pass
    # Uncopyable members (locks, generators, sockets): copy the top level only
    try:
        return copy.copy(value)
    except (TypeError, copy.Error):
        return value


def ptr(value: T) -> Ref[T]:
    """Return a reference to a copy of value.

    Handy for optional fields that want a reference to a literal, e.g.
    Config(timeout=ptr(30)). Mutating the box never touches the caller's
    object and mutating the caller's object never touches the box.

    The copy is deep when the value can be deep-copied. Otherwise it falls
    back to a shallow copy, and objects that can't be copied at all (a
    lock, a generator) are boxed as they are, so shared state stays shared.
    """
    return Ref(_private_copy(value))
