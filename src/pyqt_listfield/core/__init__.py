"""
Core utilities.

Framework-level primitives with no list-field specific logic.
"""

from .one_shot import OneShotEvent
from .reorderable_list_widget import ReorderableListWidget

__all__ = [
    "OneShotEvent",
    "ReorderableListWidget",
]
