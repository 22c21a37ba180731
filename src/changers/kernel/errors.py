"""Error types for change validation and value assertions."""

from __future__ import annotations


class InvalidChangeError(Exception):
    """Error raised when a change does not belong to a changer's vocabulary.

    This error preserves the raw change for debugging purposes.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidChangeError({super().__repr__()}, raw_value={self.raw_value!r})"


class MissingValueError(Exception):
    """Error raised when a required value is None or undefined."""
