"""
Field editor registry.

Maps editor names (a schema's ``widget`` or ``type``) to editor classes.
Registries are plain objects handed to list fields at construction, so each
form tree (and each test) can carry its own set of editors.

Design:
- register(): explicit registration, or decorator form
- get_field_class(): fail-loud lookup listing the available names
- create(): dispatch by name or by FieldSchema
- create_default_registry(): registry with the built-in "list" editor
"""

from typing import Any, Callable, Dict, List, Optional, Type, Union
import logging

from .exceptions import UnknownFieldTypeError
from .field_schema import FieldSchema, LIST_TYPE

logger = logging.getLogger(__name__)


class FieldRegistry:
    """
    Name-indexed factory for field editors.

    Example:
        registry = FieldRegistry()

        @registry.register("text")
        class TextField:
            def __init__(self, parent, field, params, set_value): ...
            def validate(self): return True
            def remove(self): ...

        editor = registry.create(text_schema, list_field, text_schema, "hi", setter)
    """

    def __init__(self, implementations: Optional[Dict[str, Type]] = None):
        self._implementations: Dict[str, Type] = dict(implementations or {})

    def register(self, name: str, field_class: Optional[Type] = None) -> Union[Type, Callable[[Type], Type]]:
        """
        Register an editor class under name.

        Can be called directly or used as a class decorator when field_class
        is omitted. Re-registering a name overwrites the previous class.
        """
        if field_class is None:
            def decorator(cls: Type) -> Type:
                self.register(name, cls)
                return cls
            return decorator

        if name in self._implementations:
            existing = self._implementations[name]
            logger.warning(
                f"Field type '{name}' already registered to {existing.__name__}. "
                f"Overwriting with {field_class.__name__}."
            )
        self._implementations[name] = field_class
        logger.debug(f"Registered {field_class.__name__} as '{name}'")
        return field_class

    def unregister(self, name: str) -> None:
        self._implementations.pop(name, None)

    def get_field_class(self, name: str) -> Type:
        """
        Get editor class by name.

        Raises:
            UnknownFieldTypeError: If name not registered
        """
        if name not in self._implementations:
            raise UnknownFieldTypeError(
                f"No field editor registered with name '{name}'. "
                f"Available editors: {self.names()}"
            )
        return self._implementations[name]

    def create(self, target: Union[str, FieldSchema], *args: Any, **kwargs: Any) -> Any:
        """Instantiate the editor for target (a name or a FieldSchema)."""
        name = target.widget_name if isinstance(target, FieldSchema) else target
        return self.get_field_class(name)(*args, **kwargs)

    def names(self) -> List[str]:
        return list(self._implementations.keys())

    def copy(self) -> "FieldRegistry":
        return FieldRegistry(self._implementations)

    def __contains__(self, name: object) -> bool:
        return name in self._implementations


def create_default_registry() -> FieldRegistry:
    """Create a registry with the built-in list editor registered."""
    from .list_field import ListField

    registry = FieldRegistry()
    registry.register(LIST_TYPE, ListField)
    return registry
