"""Parsing and validation of raw changes (e.g. decoded from JSON)."""

from .parser import parse_json_if_needed
from .schema import ChangeEnvelope, parse_change

__all__ = [
    "ChangeEnvelope",
    "parse_change",
    "parse_json_if_needed",
]
