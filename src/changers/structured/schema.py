"""Validation of raw changes received from outside the process."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from changers.kernel.change import Tag, Vocabulary, check_change
from changers.kernel.errors import InvalidChangeError
from changers.structured.parser import parse_json_if_needed


class ChangeEnvelope(BaseModel):
    """A change split into its tag and payload."""

    model_config = ConfigDict(frozen=True)

    op: Tag
    args: tuple[Any, ...] = ()

    def as_tuple(self) -> tuple[Any, ...]:
        return (self.op, *self.args)


def parse_change(raw: Any, vocabulary: Vocabulary) -> tuple[Any, ...]:
    """Turn JSON text, a list or a tuple into a change accepted by ``vocabulary``.

    Args:
        raw: e.g. '["chg", "a", ["tgl"]]' or ["set", "a", 1]
        vocabulary: Accepted tags with their payload arity

    Returns:
        The change as a tuple. Nested changes are left as decoded.

    Raises:
        InvalidChangeError: If the value is not valid JSON, not a tagged
            sequence, or does not fit the vocabulary
    """
    parsed = parse_json_if_needed(raw)
    if isinstance(parsed, (str, bytes)) or not isinstance(parsed, Sequence) or not parsed:
        raise InvalidChangeError(f"Expected a non-empty tagged list, got {parsed!r}", raw)
    try:
        envelope = ChangeEnvelope.model_validate({"op": parsed[0], "args": tuple(parsed[1:])})
    except ValidationError as e:
        raise InvalidChangeError(f"Invalid change: {e.errors()[0]['msg']}", raw) from e
    change = envelope.as_tuple()
    check_change(change, vocabulary)
    return change
