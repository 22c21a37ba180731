from .kernel import (
    Change,
    Changer,
    Evidence,
    InvalidChangeError,
    MissingValueError,
    Trace,
    fold_changes,
)
from .reducers import (
    boolean_changer,
    entity_list_changer,
    map_changer,
    object_changer,
    set_to_changer,
)
from .structured import parse_change

__all__ = [
    # Core
    "Changer",
    "Change",
    "fold_changes",
    # Reducers
    "set_to_changer",
    "boolean_changer",
    "map_changer",
    "object_changer",
    "entity_list_changer",
    # Parsing
    "parse_change",
    # Errors
    "InvalidChangeError",
    "MissingValueError",
    # Tracing
    "Trace",
    "Evidence",
]
