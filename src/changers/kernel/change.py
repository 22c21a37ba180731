"""Change encodings - tagged tuples and the vocabularies that accept them."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Literal, TypeAlias, TypeVar

from changers.kernel.errors import InvalidChangeError

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
C = TypeVar("C")
I = TypeVar("I")  # noqa: E741
ID = TypeVar("ID")

Tag = Literal["to", "set", "del", "chg", "all", "tgl"]

SetToChange: TypeAlias = tuple[Literal["to"], T]
ToggleChange: TypeAlias = tuple[Literal["tgl"]]
BooleanChange: TypeAlias = SetToChange[bool] | ToggleChange

MapChange: TypeAlias = (
    SetToChange[dict[K, V]]
    | tuple[Literal["set"], K, V]
    | tuple[Literal["del"], K]
    | tuple[Literal["chg"], K, *tuple[C, ...]]
    | tuple[Literal["all"], *tuple[C, ...]]
)

ObjectChange: TypeAlias = (
    SetToChange[T]
    | tuple[Literal["set"], str, Any]
    | tuple[Literal["del"], str]
    | tuple[Literal["chg"], str, *tuple[C, ...]]
    | tuple[Literal["all"], *tuple[C, ...]]
)

EntityListChange: TypeAlias = (
    SetToChange[list[I]]
    | tuple[Literal["set"], I]
    | tuple[Literal["del"], ID]
    | tuple[Literal["chg"], ID, *tuple[C, ...]]
    | tuple[Literal["all"], *tuple[C, ...]]
)

# Tag -> (minimum, maximum) number of elements after the tag; None is unbounded.
Vocabulary: TypeAlias = Mapping[str, tuple[int, int | None]]

SCALAR_VOCABULARY: Vocabulary = {"to": (1, 1)}
BOOLEAN_VOCABULARY: Vocabulary = {"to": (1, 1), "tgl": (0, 0)}
KEYED_VOCABULARY: Vocabulary = {
    "to": (1, 1),
    "set": (2, 2),
    "del": (1, 1),
    "chg": (1, None),
    "all": (0, None),
}
ENTITY_LIST_VOCABULARY: Vocabulary = {**KEYED_VOCABULARY, "set": (1, 1)}


class Change:
    """Constructors for change tuples.

    Kinds:
    - to: replace the whole value
    - tgl: negate a boolean
    - set: insert or overwrite one entry (one item, for entity lists)
    - del: remove one entry by key or id
    - chg: fold nested changes over one entry
    - all: fold nested changes over every entry
    """

    @staticmethod
    def to(value: T) -> SetToChange[T]:
        return ("to", value)

    @staticmethod
    def tgl() -> ToggleChange:
        return ("tgl",)

    @staticmethod
    def set(key: Any, value: Any) -> tuple[Literal["set"], Any, Any]:
        return ("set", key, value)

    @staticmethod
    def set_item(item: I) -> tuple[Literal["set"], I]:
        return ("set", item)

    @staticmethod
    def delete(key: Any) -> tuple[Literal["del"], Any]:
        return ("del", key)

    @staticmethod
    def chg(key: Any, *changes: Any) -> tuple[Any, ...]:
        return ("chg", key, *changes)

    @staticmethod
    def all(*changes: Any) -> tuple[Any, ...]:
        return ("all", *changes)


def check_change(change: Any, vocabulary: Vocabulary) -> tuple[str, tuple[Any, ...]]:
    """Split a change into its tag and payload, rejecting anything outside the vocabulary.

    Args:
        change: A tuple or list whose first element is the tag
        vocabulary: Accepted tags with their payload arity

    Returns:
        The tag and the remaining elements

    Raises:
        InvalidChangeError: If the change is not a sequence, the tag is unknown,
            or the payload length does not fit the tag
    """
    if isinstance(change, (str, bytes)) or not isinstance(change, Sequence) or not change:
        raise InvalidChangeError(f"Expected a non-empty tagged tuple, got {change!r}", change)

    tag = change[0]
    if not isinstance(tag, str) or tag not in vocabulary:
        accepted = ", ".join(vocabulary)
        raise InvalidChangeError(f"Unknown change tag {tag!r}, expected one of: {accepted}", change)

    args = tuple(change[1:])
    minimum, maximum = vocabulary[tag]
    if len(args) < minimum or (maximum is not None and len(args) > maximum):
        expected = str(minimum) if minimum == maximum else f"at least {minimum}"
        raise InvalidChangeError(
            f"Change {tag!r} takes {expected} argument(s), got {len(args)}", change
        )
    return tag, args
