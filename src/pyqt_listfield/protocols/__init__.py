"""
Field editor protocols and configuration.

ABC-based contracts that the list field relies on, plus the
application-level configuration hook.
"""

from .field_protocols import (
    ReadyPropagator,
    Validatable,
    Removable,
    FieldEditor,
    ItemContainer,
    ErrorDisplay,
)
from .list_config import ListFieldConfig, set_list_config, get_list_config

__all__ = [
    "ReadyPropagator",
    "Validatable",
    "Removable",
    "FieldEditor",
    "ItemContainer",
    "ErrorDisplay",
    "ListFieldConfig",
    "set_list_config",
    "get_list_config",
]
