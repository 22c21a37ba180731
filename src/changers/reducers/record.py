"""Object (record) changer - addresses the properties of a record.

A record is either a mutable mapping (properties are its keys) or an
attribute object such as a dataclass, SimpleNamespace or pydantic model
(properties are its attributes).
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import fields, is_dataclass
from typing import Any, TypeVar

from changers.kernel.change import KEYED_VOCABULARY, ObjectChange, check_change
from changers.kernel.changer import Changer, fold_changes

T = TypeVar("T")
C = TypeVar("C")


_ABSENT = object()


def _lookup(record: Any, key: str) -> Any:
    """Read a property from the record itself, or _ABSENT if it is not set."""
    if isinstance(record, MutableMapping):
        return record.get(key, _ABSENT)
    if hasattr(record, "__dict__"):
        # instance only; class defaults do not count as present
        return vars(record).get(key, _ABSENT)
    try:
        return getattr(record, key)
    except AttributeError:
        return _ABSENT


def _put(record: Any, key: str, value: Any) -> None:
    if isinstance(record, MutableMapping):
        record[key] = value
    else:
        setattr(record, key, value)


def _remove(record: Any, key: str) -> None:
    if isinstance(record, MutableMapping):
        del record[key]
    else:
        delattr(record, key)


def _keys(record: Any) -> list[str]:
    """Snapshot of the properties present right now."""
    if isinstance(record, MutableMapping):
        return list(record.keys())
    if hasattr(record, "__dict__"):
        return list(vars(record))
    if is_dataclass(record):
        # slotted dataclass
        return [f.name for f in fields(record) if hasattr(record, f.name)]
    raise TypeError(f"Cannot enumerate properties of {type(record).__name__}")


def object_changer(
    apply_changes: Callable[[Any, C], Any],
    name: str = "object",
) -> Changer[T, ObjectChange[T, C]]:
    """Create a changer over the properties of a record.

    Same vocabulary as map_changer. A property holding None counts as absent
    for del and chg. all changes the properties present when it starts, in
    place, skipping any removed along the way, and never adds new ones.
    """

    def _apply(state: T, change: ObjectChange[T, C]) -> Any:
        tag, args = check_change(change, KEYED_VOCABULARY)
        if tag == "to":
            return args[0]
        if tag == "set":
            key, value = args
            _put(state, key, value)
            return state
        if tag == "del":
            key = args[0]
            current = _lookup(state, key)
            if current is not None and current is not _ABSENT:
                _remove(state, key)
            return state
        if tag == "chg":
            key, *changes = args
            current = _lookup(state, key)
            if current is not None and current is not _ABSENT:
                _put(state, key, fold_changes(apply_changes, current, changes))
            return state
        # all
        for key in _keys(state):
            current = _lookup(state, key)
            if current is _ABSENT:
                # removed by an earlier nested change
                continue
            _put(state, key, fold_changes(apply_changes, current, args))
        return state

    return Changer(_apply, name=name, vocabulary=KEYED_VOCABULARY)
