"""Scalar setter - the degenerate changer that only replaces the value."""

from __future__ import annotations

from typing import TypeVar

from changers.kernel.change import SCALAR_VOCABULARY, SetToChange, check_change
from changers.kernel.changer import Changer

T = TypeVar("T")


def set_to_changer(name: str = "set_to") -> Changer[T, SetToChange[T]]:
    """Create a changer whose only change is ``("to", value)``.

    The prior state is discarded and the supplied value returned unchanged.
    """

    def _apply(state: T, change: SetToChange[T]) -> T:
        _, args = check_change(change, SCALAR_VOCABULARY)
        return args[0]

    return Changer(_apply, name=name, vocabulary=SCALAR_VOCABULARY)
