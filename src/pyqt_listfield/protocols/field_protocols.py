"""
Field editor ABC contracts.

Explicit contracts between a list field and its collaborators: the ancestor
that propagates readiness, the child editors it creates, and the rendering
widget that displays them.

Design Philosophy:
- Explicit inheritance over duck typing where we own the type
- isinstance() checks against these ABCs work for registered virtual subclasses
- Small capabilities, composed by multiple inheritance
"""

from abc import ABC, abstractmethod
from typing import Any, Callable


class ReadyPropagator(ABC):
    """
    ABC for form elements that accept readiness callbacks.

    Ancestors run the callbacks once the form has finished building.
    """

    @abstractmethod
    def ready(self, callback: Callable[[], None]) -> None:
        """
        Register a callback to run when the form is ready.

        Args:
            callback: Zero-argument callable
        """
        pass


class Validatable(ABC):
    """ABC for form elements that can check their own value."""

    @abstractmethod
    def validate(self) -> bool:
        """
        Validate the element and display any errors.

        Returns:
            True if the element's current value is acceptable. Only an
            explicit False marks the element invalid; None is accepted.
        """
        pass


class Removable(ABC):
    """ABC for form elements that hold resources which must be released."""

    @abstractmethod
    def remove(self) -> None:
        """Release the element's resources before it is detached."""
        pass


class FieldEditor(Validatable, Removable):
    """
    ABC for child field editors created by a list field.

    Implementations are constructed as::

        editor = cls(list_field, child_schema, stored_value, set_value)

    and write their value back with ``set_value(child_schema, value)``.
    The constructor signature is not enforced; registries only require
    validate() and remove().
    """


class ItemContainer(ABC):
    """
    ABC for rendering widgets that display list items.

    A list field calls add_item() once per child on attach, on every add,
    and for every existing child when the widget is swapped.
    """

    @abstractmethod
    def add_item(self, child: Any) -> None:
        """
        Append a child editor to the display.

        Args:
            child: The child field editor instance
        """
        pass


class ErrorDisplay(ABC):
    """ABC for form elements that show validation errors."""

    @abstractmethod
    def set_error(self, message: str) -> None:
        pass

    @abstractmethod
    def clear_errors(self) -> None:
        pass
