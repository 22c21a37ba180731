"""Changer - the reducer wrapper every factory returns."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from functools import reduce
from typing import Any, Generic, TypeVar

from changers.kernel.change import Vocabulary
from changers.kernel.trace import Trace

S = TypeVar("S")
C = TypeVar("C")
V = TypeVar("V")


Reducer = Callable[[S, C], S]


def fold_changes(apply_changes: Callable[[V, Any], V], value: V, changes: Iterable[Any]) -> V:
    """Apply changes left to right, each result feeding the next."""
    return reduce(apply_changes, changes, value)


@dataclass(frozen=True)
class Changer(Generic[S, C]):
    """A reducer ``(state, change) -> state`` with its name and vocabulary.

    A Changer is callable, so it can be handed to an outer container's
    factory as that container's ``apply_changes``.
    """

    _apply: Reducer[S, C]
    name: str = "changer"
    vocabulary: Vocabulary = field(default_factory=dict)
    trace: Trace | None = None

    def __call__(self, state: S, change: C) -> S:
        return self.apply(state, change)

    def apply(self, state: S, change: C, trace: Trace | None = None) -> S:
        """Apply one change and return the next state.

        Args:
            state: Current state; containers may be mutated in place
            change: A tagged tuple from this changer's vocabulary
            trace: Optional trace overriding the one bound via traced()

        Returns:
            The next state. Callers must use it instead of the input.
        """
        trace = trace if trace is not None else self.trace
        if trace is None:
            return self._apply(state, change)

        step_id = trace.record(
            "change_begin",
            info={"changer": self.name, "op": _tag_of(change)},
        )
        if step_id is not None:
            trace.push(step_id)
        try:
            start_time = time.perf_counter()
            try:
                result = self._apply(state, change)
            except Exception as exc:
                trace.record(
                    "change_error",
                    info={"changer": self.name, "error": str(exc)},
                    parent_id=step_id,
                )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            trace.record(
                "change_end",
                info={"changer": self.name},
                parent_id=step_id,
                duration_ms=duration_ms,
            )
            return result
        finally:
            if step_id is not None:
                trace.pop()

    def fold(self, state: S, changes: Iterable[C], trace: Trace | None = None) -> S:
        """Apply several changes in order."""
        return fold_changes(lambda current, change: self.apply(current, change, trace), state, changes)

    def traced(self, trace: Trace) -> Changer[S, C]:
        """Return a copy that records every application into ``trace``."""
        return replace(self, trace=trace)

    def parse(self, raw: Any) -> C:
        """Validate a raw change (JSON text, list or tuple) against this vocabulary."""
        # deferred: changers.structured imports the kernel package
        from changers.structured import parse_change

        return parse_change(raw, self.vocabulary)  # type: ignore[return-value]


def _tag_of(change: Any) -> Any:
    try:
        return change[0]
    except (TypeError, IndexError, KeyError):
        return None
