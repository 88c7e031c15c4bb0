"""
Form fields and list management.

FieldSchema descriptors, the injectable FieldRegistry and the ListField
controller that keeps child editors and parameter lists in sync.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .exceptions import ListFieldError, SchemaError, RegistryError, UnknownFieldTypeError
    from .field_schema import FieldSchema
    from .field_registry import FieldRegistry, create_default_registry
    from .form_element import FormElement
    from .messages import MessageCatalog
    from .list_field import ListField, ListFieldState, UNSET
    from .root_form import RootForm

_EXPORTS = {
    "ListFieldError": ("pyqt_listfield.forms.exceptions", "ListFieldError"),
    "SchemaError": ("pyqt_listfield.forms.exceptions", "SchemaError"),
    "RegistryError": ("pyqt_listfield.forms.exceptions", "RegistryError"),
    "UnknownFieldTypeError": ("pyqt_listfield.forms.exceptions", "UnknownFieldTypeError"),
    "FieldSchema": ("pyqt_listfield.forms.field_schema", "FieldSchema"),
    "FieldRegistry": ("pyqt_listfield.forms.field_registry", "FieldRegistry"),
    "create_default_registry": ("pyqt_listfield.forms.field_registry", "create_default_registry"),
    "FormElement": ("pyqt_listfield.forms.form_element", "FormElement"),
    "MessageCatalog": ("pyqt_listfield.forms.messages", "MessageCatalog"),
    "ListField": ("pyqt_listfield.forms.list_field", "ListField"),
    "ListFieldState": ("pyqt_listfield.forms.list_field", "ListFieldState"),
    "UNSET": ("pyqt_listfield.forms.list_field", "UNSET"),
    "RootForm": ("pyqt_listfield.forms.root_form", "RootForm"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
