"""Assertions turning a possibly missing value into a present one."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Final, TypeVar

from changers.kernel.errors import MissingValueError

T = TypeVar("T")


class _Undefined:
    """Marker for a value that was never provided (as opposed to None)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def throw_if_null(message_supplier: Callable[[], str] | None = None) -> Callable[[Any], Any]:
    """Return a check that rejects None and UNDEFINED and passes anything else through."""

    def check(value: T | None) -> T:
        if value is not None and value is not UNDEFINED:
            return value  # type: ignore[return-value]
        if message_supplier:
            raise MissingValueError(message_supplier())
        raise MissingValueError("Expected value to be defined and non null")

    return check


def throw_if_undefined(message_supplier: Callable[[], str] | None = None) -> Callable[[Any], Any]:
    """Return a check that rejects only UNDEFINED; None is accepted as a value."""

    def check(value: T) -> T:
        if value is not UNDEFINED:
            return value
        if message_supplier:
            raise MissingValueError(message_supplier())
        raise MissingValueError("Expected value to be defined")

    return check
