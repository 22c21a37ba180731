"""Keyed-map changer - addresses entries of a mutable mapping by key."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, TypeVar

from changers.kernel.change import KEYED_VOCABULARY, MapChange, check_change
from changers.kernel.changer import Changer, fold_changes

K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C")


def map_changer(
    apply_changes: Callable[[V, C], V],
    name: str = "map",
) -> Changer[MutableMapping[K, V], MapChange[K, V, C]]:
    """Create a changer over a mapping whose values are changed by ``apply_changes``.

    Semantics:
        - to: return the replacement mapping
        - set: insert or overwrite one entry, in place
        - del: remove one entry if present, in place
        - chg: fold nested changes over one entry, in place; a missing or
          None entry is left alone
        - all: build a new dict with nested changes folded over every value,
          keeping key order

    Args:
        apply_changes: Reducer for a single value, fed one nested change at a time.
        name: Name recorded in traces.

    Returns:
        Changer[MutableMapping[K, V], MapChange]: The map changer.
    """

    def _apply(state: MutableMapping[K, V], change: MapChange[K, V, C]) -> Any:
        tag, args = check_change(change, KEYED_VOCABULARY)
        if tag == "to":
            return args[0]
        if tag == "set":
            key, value = args
            state[key] = value
            return state
        if tag == "del":
            key = args[0]
            if key in state:
                del state[key]
            return state
        if tag == "chg":
            key, *changes = args
            current = state.get(key)
            if current is not None:
                state[key] = fold_changes(apply_changes, current, changes)
            return state
        # all
        return {key: fold_changes(apply_changes, value, args) for key, value in state.items()}

    return Changer(_apply, name=name, vocabulary=KEYED_VOCABULARY)
