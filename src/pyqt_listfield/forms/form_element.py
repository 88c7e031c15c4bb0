"""Error display state shared by form elements."""

from typing import List, Tuple
import logging

logger = logging.getLogger(__name__)


class FormElement:
    """
    Holds the validation errors currently shown for one form element.

    Elements embed a FormElement and forward set_error()/clear_errors() to it
    rather than inheriting error handling from a common base class.
    """

    def __init__(self, name: str):
        self.name = name
        self._errors: List[str] = []

    @property
    def errors(self) -> Tuple[str, ...]:
        return tuple(self._errors)

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    def set_error(self, message: str) -> None:
        """Record an error message for display."""
        logger.debug(f"{self.name}: {message}")
        self._errors.append(message)

    def clear_errors(self) -> None:
        self._errors.clear()
