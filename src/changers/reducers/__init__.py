"""Reducer factories for the five supported state shapes."""

from .boolean import boolean_changer
from .entity_list import entity_list_changer
from .mapping import map_changer
from .record import object_changer
from .scalar import set_to_changer

__all__ = [
    "set_to_changer",
    "boolean_changer",
    "map_changer",
    "object_changer",
    "entity_list_changer",
]
