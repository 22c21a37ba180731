"""JSON parsing utilities for raw changes."""

from __future__ import annotations

import json
from typing import Any

from changers.kernel.errors import InvalidChangeError


def parse_json_if_needed(value: str | Any) -> Any:
    """Parse JSON string if the value is a string.

    Args:
        value: The value to potentially parse as JSON

    Returns:
        The parsed JSON object, or the original value if not a string

    Raises:
        InvalidChangeError: If the value is a string but cannot be parsed as JSON
    """
    if isinstance(value, str):
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidChangeError(f"Invalid JSON: {e.msg} at position {e.pos}", value) from e
    return value
