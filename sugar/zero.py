"""Zero values: what a type gives you before anything is assigned to it."""

import dataclasses
import enum
import inspect
import types
import typing
from typing import Annotated, Any, TypeVar, Union, get_args, get_origin

from pydantic import BaseModel

from sugar.errors import ZeroValueError
from sugar.ptr import Ref

T = TypeVar("T")

# Types whose zero is "no value" rather than an instance
_NIL_TYPES: tuple[Any, ...] = (None, types.NoneType, Any, object)


def zero(tp: type[T]) -> T:
    """Return the zero value of tp.

    Default-constructible classes give tp(); references (Optional, Any,
    callables, abstract classes, exceptions, Ref) give None; dataclasses,
    NamedTuples and pydantic models are built field by field from their
    defaults and the zero of each remaining annotation.

    Raises:
        ZeroValueError: tp has no sensible default
    """
    if tp in _NIL_TYPES or isinstance(tp, TypeVar):
        return None

    origin = get_origin(tp)
    if origin is not None:
        return _zero_generic(tp, origin)

    if not isinstance(tp, type):
        raise ZeroValueError(tp, "not a type")

    if issubclass(tp, (BaseException, Ref)) or inspect.isabstract(tp):
        return None
    if getattr(tp, "_is_protocol", False):
        return None
    if issubclass(tp, enum.Enum):
        try:
            return next(iter(tp))
        except StopIteration:
            raise ZeroValueError(tp, "enum has no members") from None
    if dataclasses.is_dataclass(tp):
        return _zero_dataclass(tp)
    if issubclass(tp, BaseModel):
        return _zero_model(tp)
    if issubclass(tp, tuple) and hasattr(tp, "_fields"):
        return _zero_namedtuple(tp)

    return _construct(tp, tp)


def _zero_generic(tp: Any, origin: Any) -> Any:
    args = get_args(tp)

    if origin is Annotated:
        return zero(args[0])
    if origin in (Union, types.UnionType):
        if types.NoneType in args:
            return None
        raise ZeroValueError(tp, "union without None")
    if origin is typing.Literal:
        raise ZeroValueError(tp, "literal types have no default")
    if origin is tuple and args and args[-1] is not Ellipsis:
        return tuple(zero(arg) for arg in args)
    return zero(origin)


def _construct(tp: Any, factory: Any, **kwargs: Any) -> Any:
    """Call factory(**kwargs), reporting any failure as ZeroValueError."""
    try:
        return factory(**kwargs)
    except Exception as e:
        raise ZeroValueError(tp, f"constructor raised {type(e).__name__}: {e}") from e


def _field_hints(tp: type) -> dict[str, Any]:
    try:
        return typing.get_type_hints(tp, include_extras=True)
    except NameError as e:
        raise ZeroValueError(tp, f"unresolvable annotation ({e})") from e


def _zero_dataclass(tp: Any) -> Any:
    # __init__ parameters include InitVar pseudo-fields, which fields() leaves out
    hints = _field_hints(tp)
    kwargs: dict[str, Any] = {}
    try:
        params = inspect.signature(tp).parameters
    except (TypeError, ValueError) as e:
        raise ZeroValueError(tp, "no inspectable constructor") from e
    for name, param in params.items():
        if param.default is not inspect.Parameter.empty:
            continue
        if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
            continue
        hint = hints.get(name, Any)
        if isinstance(hint, dataclasses.InitVar):
            hint = hint.type
        kwargs[name] = zero(hint)
    return _construct(tp, tp, **kwargs)


def _zero_model(tp: type[BaseModel]) -> Any:
    kwargs = {
        name: zero(field.annotation)
        for name, field in tp.model_fields.items()
        if field.is_required()
    }
    return _construct(tp, tp.model_construct, **kwargs)


def _zero_namedtuple(tp: Any) -> Any:
    hints = _field_hints(tp)
    defaults = getattr(tp, "_field_defaults", {})
    kwargs = {
        name: zero(hints.get(name, Any))
        for name in tp._fields
        if name not in defaults
    }
    return _construct(tp, tp, **kwargs)
