"""Entity-list changer - addresses list items by a derived identity."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from changers.kernel.change import ENTITY_LIST_VOCABULARY, EntityListChange, check_change
from changers.kernel.changer import Changer, fold_changes

I = TypeVar("I")  # noqa: E741
ID = TypeVar("ID")
C = TypeVar("C")


def entity_list_changer(
    get_id: Callable[[I], ID],
    apply_changes: Callable[[I, C], I],
    name: str = "entity_list",
) -> Changer[list[I], EntityListChange[I, ID, C]]:
    """Create a changer over a list of items identified by ``get_id``.

    Semantics:
        - to: return the replacement list
        - set: overwrite the item with the same id, or append
        - del: remove the item with the given id, if any
        - chg: fold nested changes over the item with the given id, if any
        - all: fold nested changes over every item in place

    Lookups are linear scans comparing ids with ``==``; only the first
    match is touched.

    Args:
        get_id: Derives a stable id from an item.
        apply_changes: Reducer for a single item, fed one nested change at a time.
        name: Name recorded in traces.

    Returns:
        Changer[list[I], EntityListChange]: The entity-list changer.
    """

    def _apply(state: list[I], change: EntityListChange[I, ID, C]) -> Any:
        def find_index(id: Any) -> int:
            for i, item in enumerate(state):
                if get_id(item) == id:
                    return i
            return -1

        tag, args = check_change(change, ENTITY_LIST_VOCABULARY)
        if tag == "to":
            return args[0]
        if tag == "set":
            item = args[0]
            i = find_index(get_id(item))
            if i >= 0:
                state[i] = item
            else:
                state.append(item)
            return state
        if tag == "del":
            i = find_index(args[0])
            if i >= 0:
                del state[i]
            return state
        if tag == "chg":
            id, *changes = args
            i = find_index(id)
            if i >= 0:
                state[i] = fold_changes(apply_changes, state[i], changes)
            return state
        # all
        for i in range(len(state)):
            state[i] = fold_changes(apply_changes, state[i], args)
        return state

    return Changer(_apply, name=name, vocabulary=ENTITY_LIST_VOCABULARY)
