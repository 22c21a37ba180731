"""Boolean changer - replace or toggle a flag."""

from __future__ import annotations

from changers.kernel.change import BOOLEAN_VOCABULARY, BooleanChange, check_change
from changers.kernel.changer import Changer


def boolean_changer(name: str = "boolean") -> Changer[bool, BooleanChange]:
    """Create a changer accepting ``("to", flag)`` and ``("tgl",)``."""

    def _apply(state: bool, change: BooleanChange) -> bool:
        tag, args = check_change(change, BOOLEAN_VOCABULARY)
        if tag == "to":
            return args[0]
        # tgl
        return not state

    return Changer(_apply, name=name, vocabulary=BOOLEAN_VOCABULARY)
