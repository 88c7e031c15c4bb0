"""
Root form - the ancestor that owns a form's parameters.

Holds the parameter dictionary every top-level field writes into and the
form-wide readiness event that nested fields register their deferred work on.
"""

from typing import Any, Callable, Dict, Optional
import logging

from pyqt_listfield.core import OneShotEvent
from pyqt_listfield.protocols import ReadyPropagator
from .exceptions import RegistryError
from .field_registry import FieldRegistry
from .field_schema import FieldSchema
from .messages import Translator

logger = logging.getLogger(__name__)


class RootForm(ReadyPropagator):
    """
    Top of a form tree.

    Example:
        form = RootForm(registry=create_default_registry())
        tags = form.create_field(tags_schema)
        form.mark_ready()
        ...
        form.params  # {'tags': [...]} or {} once the list is emptied
    """

    def __init__(self, params: Optional[Dict[str, Any]] = None, *,
                 registry: Optional[FieldRegistry] = None,
                 translator: Optional[Translator] = None):
        self.params: Dict[str, Any] = params if params is not None else {}
        self.registry = registry
        self.translator = translator
        self.children: list = []
        self._ready = OneShotEvent("form_ready")

    @property
    def is_ready(self) -> bool:
        return self._ready.is_set

    def set_value(self, field: FieldSchema, value: Any = None) -> None:
        """Store value under the field's name, or drop the key when value is None."""
        if value is None:
            self.params.pop(field.name, None)
        else:
            self.params[field.name] = value
        logger.debug(f"Form value '{field.name}' {'cleared' if value is None else 'set'}")

    def create_field(self, field: FieldSchema) -> Any:
        """Create the editor for a top-level field, bound to params[field.name]."""
        if self.registry is None:
            raise RegistryError(f"Form has no field registry to create '{field.name}' with")
        child = self.registry.create(field, self, field, self.params.get(field.name), self.set_value)
        self.children.append(child)
        return child

    def ready(self, callback: Callable[[], None]) -> None:
        self._ready.connect(callback)

    def mark_ready(self) -> None:
        """Signal that the form has been built; runs all queued callbacks."""
        self._ready.fire()

    def validate(self) -> bool:
        """Validate every top-level field without stopping at the first failure."""
        valid = True
        for child in self.children:
            if child.validate() is False:
                valid = False
        return valid
