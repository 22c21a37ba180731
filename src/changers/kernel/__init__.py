"""Kernel layer - change encodings, the Changer wrapper and runtime trace."""

from changers.kernel.change import (
    BOOLEAN_VOCABULARY,
    ENTITY_LIST_VOCABULARY,
    KEYED_VOCABULARY,
    SCALAR_VOCABULARY,
    BooleanChange,
    Change,
    EntityListChange,
    MapChange,
    ObjectChange,
    SetToChange,
    Tag,
    ToggleChange,
    Vocabulary,
    check_change,
)
from changers.kernel.changer import Changer, Reducer, fold_changes
from changers.kernel.errors import InvalidChangeError, MissingValueError
from changers.kernel.trace import Evidence, Trace

__all__ = [
    "Changer",
    "Reducer",
    "fold_changes",
    # Encodings
    "Change",
    "Tag",
    "SetToChange",
    "ToggleChange",
    "BooleanChange",
    "MapChange",
    "ObjectChange",
    "EntityListChange",
    "Vocabulary",
    "SCALAR_VOCABULARY",
    "BOOLEAN_VOCABULARY",
    "KEYED_VOCABULARY",
    "ENTITY_LIST_VOCABULARY",
    "check_change",
    # Errors
    "InvalidChangeError",
    "MissingValueError",
    # Tracing
    "Evidence",
    "Trace",
]
