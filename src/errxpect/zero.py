"""Zero-value detection for arbitrary runtime types."""

from __future__ import annotations

import dataclasses
import logging
import numbers
from datetime import timedelta
from functools import singledispatch
from pathlib import PurePath
from typing import Any, Iterable

from pydantic import BaseModel

logger = logging.getLogger(__name__)

# Types whose no-argument constructor yields their zero value without side effects
_VALUE_TYPES = (
    numbers.Number,
    str,
    bytes,
    bytearray,
    list,
    dict,
    tuple,
    set,
    frozenset,
    timedelta,
    PurePath,
)


@singledispatch
def is_zero(value: Any) -> bool:
    """Return True if *value* equals the default value of its own type.

    ``None`` is always zero. Dataclasses, named tuples and pydantic models
    are zero when all of their fields are. Numbers (including
    ``Decimal``, ``Fraction`` and numpy scalars), strings, bytes, builtin
    containers, ``timedelta`` and paths are compared against
    ``type(value)()``. Instances of any other class are non-zero unless a
    test is registered for them with register_zero(); their constructors
    are never called.
    """
    return _is_zero(value, set())


def _is_zero(value: Any, seen: set[int]) -> bool:
    impl = is_zero.dispatch(type(value))
    if impl is not is_zero.dispatch(object):
        return impl(value)
    if value is None:
        return True
    # a value reached again through its own fields is not empty
    if id(value) in seen:
        return False
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [field.name for field in dataclasses.fields(value)]
        return _fields_zero(value, names, seen)
    if isinstance(value, tuple) and hasattr(type(value), "_fields"):
        return _fields_zero(value, type(value)._fields, seen)
    if isinstance(value, BaseModel):
        return _fields_zero(value, type(value).model_fields, seen)
    if not isinstance(value, _VALUE_TYPES):
        return False
    try:
        return bool(type(value)() == value)
    except Exception as exc:
        # array-likes, odd constructors and raising __eq__ all land here
        logger.debug(f"No zero value for {type(value).__name__}: {exc!r}")
        return False


def _fields_zero(value: Any, names: Iterable[str], seen: set[int]) -> bool:
    seen.add(id(value))
    try:
        return all(_is_zero(getattr(value, name, None), seen) for name in names)
    finally:
        seen.discard(id(value))


@is_zero.register
def _(value: BaseException) -> bool:
    return False


def register_zero(cls: type):
    """Decorator registering a custom zero test for *cls*.

    Example::

        @register_zero(Money)
        def _(value: Money) -> bool:
            return value.cents == 0
    """
    return is_zero.register(cls)
