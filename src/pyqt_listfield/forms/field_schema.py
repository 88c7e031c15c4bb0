"""
Immutable field schema descriptors.

A FieldSchema describes one field of a form: its name, how it is labelled,
which editor renders it and, for list fields, the cardinality bounds and the
schema of the repeated child.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional
import logging

from .exceptions import SchemaError

logger = logging.getLogger(__name__)

# Semantics keys that differ from the dataclass attribute names
_SEMANTICS_KEY_MAP = {
    "defaultNum": "default_num",
}

LIST_TYPE = "list"


@dataclass(frozen=True)
class FieldSchema:
    """
    Declarative description of a form field.

    Attributes:
        name: Parameter key the field is stored under
        type: Semantic type name (e.g. "list", "text", "number")
        label: Human readable label, falls back to name
        entity: Singular noun for list items in messages (lists only)
        min: Minimum item count (lists only)
        max: Maximum item count (lists only)
        default_num: Items created when there is no existing data (lists only)
        default: Default value for a freshly created field
        field: Schema of the repeated child (lists only)
        widget: Explicit editor name, overrides type for registry lookup
    """
    name: str
    type: str = "text"
    label: Optional[str] = None
    entity: Optional[str] = None
    min: Optional[int] = None
    max: Optional[int] = None
    default_num: Optional[int] = None
    default: Any = None
    field: Optional["FieldSchema"] = None
    widget: Optional[str] = None

    @property
    def widget_name(self) -> str:
        """Registry key for the editor of this field."""
        return self.widget if self.widget is not None else self.type

    @property
    def display_label(self) -> str:
        """Label used in messages."""
        return self.label if self.label is not None else self.name

    @property
    def is_list(self) -> bool:
        return self.type == LIST_TYPE

    def effective_default_num(self, fallback: int = 1) -> int:
        """
        Number of items to create when the list has no existing data.

        Uses default_num, then min, then fallback. The schema is not modified.
        """
        if self.default_num is not None:
            return self.default_num
        if self.min is not None:
            return self.min
        return fallback

    @classmethod
    def from_semantics(cls, semantics: Mapping[str, Any]) -> "FieldSchema":
        """
        Build a schema tree from a semantics dictionary.

        Accepts the JSON-style keys of form semantics files (``defaultNum``)
        as well as attribute names. Unknown keys are ignored.

        Raises:
            SchemaError: If name is missing or a list has no child field
        """
        if "name" not in semantics:
            raise SchemaError(f"Field semantics missing 'name': {dict(semantics)!r}")

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in semantics.items():
            attr = _SEMANTICS_KEY_MAP.get(key, key)
            if attr not in known:
                logger.debug(f"Ignoring unknown semantics key '{key}' on field '{semantics['name']}'")
                continue
            kwargs[attr] = value

        child = kwargs.get("field")
        if child is not None and not isinstance(child, FieldSchema):
            kwargs["field"] = cls.from_semantics(child)

        schema = cls(**kwargs)
        if schema.is_list and schema.field is None:
            raise SchemaError(f"List field '{schema.name}' has no child 'field' description")
        return schema
