"""
List field controller - keeps child editors and the parameter list in sync.

A ListField owns an ordered collection of child field editors. Each child is
bound to one slot of the backing parameter list, which is shared by reference
with the owning form. Every mutation (add, remove, move) updates both
sequences in lockstep so that index i of the children always corresponds to
index i of the parameters.

The owning form is only notified (through ``set_value``) when the parameter
list appears or disappears. Children write their own values straight into
their slot.
"""

from abc import ABCMeta
from enum import Enum
from itertools import count
from typing import Any, Callable, Dict, List, Optional
import logging

from PyQt6.QtCore import QObject, pyqtSignal

from pyqt_listfield.core import OneShotEvent
from pyqt_listfield.protocols import (
    ErrorDisplay, FieldEditor, ItemContainer, ReadyPropagator, get_list_config,
)
from .exceptions import RegistryError
from .field_schema import FieldSchema
from .form_element import FormElement
from .messages import EXCEEDS_MAX, EXCEEDS_MIN, Translator, default_translator

logger = logging.getLogger(__name__)

SetValue = Callable[[FieldSchema, Optional[List[Any]]], None]


class _Unset:
    """Marker for "no override value supplied"."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()


class _ListFieldMeta(type(QObject), ABCMeta):
    """Metaclass combining Qt's QObject metaclass with ABCMeta."""
    pass


class ListFieldState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class ListField(QObject, FieldEditor, ReadyPropagator, ErrorDisplay, metaclass=_ListFieldMeta):
    """
    Repeatable field made of child editors bound to a parameter list.

    Invariants (checked by check_alignment()):
    - parameters is None iff there are no children
    - otherwise len(parameters) == child count
    - a child's write-back lands in the slot at its current position

    Args:
        parent: Ancestor exposing ready(callback). If it has ``registry`` or
            ``translator`` attributes they are inherited when not given.
        field: Schema of this list; ``field.field`` describes the children
        parameters: Existing parameter list, or None
        set_value: Called as set_value(field, parameters) when the list is
            created and set_value(field, None) when it becomes empty
        registry: FieldRegistry used to create child editors
        widget: Rendering widget to attach once the children exist
        translator: Callable rendering validation messages
    """

    # Emitted after the rendering widget is swapped; children are re-attached
    widget_changed = pyqtSignal(object)

    def __init__(self, parent: ReadyPropagator, field: FieldSchema,
                 parameters: Optional[List[Any]], set_value: SetValue, *,
                 registry=None, widget: Optional[ItemContainer] = None,
                 translator: Optional[Translator] = None):
        super().__init__()
        self.state = ListFieldState.UNINITIALIZED

        self.parent_field = parent
        self.field = field
        self._set_value = set_value
        self._parameters: Optional[List[Any]] = parameters

        self.registry = registry if registry is not None else getattr(parent, "registry", None)
        if self.registry is None:
            raise RegistryError(f"List field '{field.name}' has no field registry to create children with")
        self.translator: Translator = (
            translator or getattr(parent, "translator", None) or default_translator()
        )

        self._element = FormElement(field.name)
        self.widget: Optional[ItemContainer] = None

        # Children and their stable handles, index-aligned with _parameters
        self._children: List[Any] = []
        self._handles: List[int] = []
        self._index_by_handle: Dict[int, int] = {}
        self._handle_counter = count()

        # Readiness: forward to the ancestor until it fires, then handle locally
        self._ancestor_ready = OneShotEvent(f"{field.name}.ancestor_ready")
        self._pending_ready: List[Callable[[], None]] = []
        self._constructing = 0
        parent.ready(self._ancestor_ready.fire)

        self.widget_changed.connect(self._attach_children)

        self._init_items()

        if widget is not None:
            self.change_widget(widget)

    def __repr__(self) -> str:
        return f"ListField(name={self.field.name!r}, items={len(self._children)})"

    # ==================== INITIALIZATION ====================

    def _init_items(self) -> None:
        """Create one child per existing parameter, or the default number of empty ones."""
        self.state = ListFieldState.INITIALIZING
        if self._parameters:
            for index in range(len(self._parameters)):
                self._create_child(index)
        else:
            # An empty list is treated as absent; a fresh one is published on first add
            self._parameters = None
            default_count = self.field.effective_default_num(get_list_config().default_item_count)
            for index in range(default_count):
                self._create_child(index)
        self.state = ListFieldState.READY
        logger.debug(f"Initialized list '{self.field.name}' with {len(self._children)} item(s)")

    def _create_child(self, index: int, override: Any = UNSET) -> Any:
        """
        Create the child editor for slot index and append it to the children.

        The slot value is the override if given, else the stored value, else
        the child schema's default.
        """
        child_field = self.field.field

        if self._parameters is None:
            self._parameters = []
            self._set_value(self.field, self._parameters)

        if index == len(self._parameters):
            self._parameters.append(None)
        if self._parameters[index] is None and child_field.default is not None:
            self._parameters[index] = child_field.default
        if override is not UNSET:
            self._parameters[index] = override

        handle = next(self._handle_counter)
        self._index_by_handle[handle] = index

        def set_child_value(_child_field: FieldSchema, value: Any) -> None:
            self._parameters[self._index_by_handle[handle]] = value

        self._constructing += 1
        try:
            child = self.registry.create(child_field, self, child_field, self._parameters[index], set_child_value)
        except Exception:
            del self._index_by_handle[handle]
            raise
        finally:
            self._constructing -= 1

        self._children.append(child)
        self._handles.append(handle)

        if self._ancestor_ready.is_set and not self._constructing:
            self._flush_ready_callbacks()

        return child

    # ==================== QUERIES ====================

    @property
    def parameters(self) -> Optional[List[Any]]:
        """The backing parameter list, or None when there are no items."""
        return self._parameters

    @property
    def child_count(self) -> int:
        return len(self._children)

    def child_at(self, index: int) -> Any:
        return self._children[index]

    def index_of(self, child: Any) -> int:
        """Current position of child. Raises ValueError if it is not ours."""
        for index, candidate in enumerate(self._children):
            if candidate is child:
                return index
        raise ValueError(f"{child!r} is not a child of {self!r}")

    def get_entity(self) -> str:
        """Singular noun for the items in this list."""
        if self.field.entity is not None:
            return self.field.entity
        return get_list_config().default_entity

    def check_alignment(self) -> bool:
        """True if children, handles and parameters are index-aligned."""
        if self._parameters is None:
            return not self._children and not self._handles
        if not (len(self._children) == len(self._handles) == len(self._parameters)):
            return False
        return all(self._index_by_handle.get(handle) == index
                   for index, handle in enumerate(self._handles))

    # ==================== MUTATIONS ====================

    def add_item(self, override: Any = UNSET) -> bool:
        """
        Append a new item at the end of the list.

        Args:
            override: Value for the new slot, replacing the child's default

        Returns:
            False if the list is already at its maximum size, True otherwise
        """
        if self._is_full():
            logger.debug(f"List '{self.field.name}' is full ({self.field.max}), refusing add")
            return False

        child = self._create_child(len(self._children), override)
        if self.widget is not None:
            self.widget.add_item(child)
        return True

    def remove_item(self, index: int) -> None:
        """
        Remove the item at index, releasing its child editor first.

        index must be a valid position; invalid indices raise IndexError from
        the underlying list and are a caller error.
        """
        child = self._children[index]
        child.remove()
        del self._children[index]
        handle = self._handles.pop(index)
        del self._index_by_handle[handle]
        self._reindex(index, len(self._handles))

        del self._parameters[index]
        if not self._parameters:
            self._parameters = None
            self._set_value(self.field, None)
        logger.debug(f"Removed item {index} from list '{self.field.name}'")

    def remove_all_items(self) -> None:
        """Remove every item, e.g. when the child type changes."""
        self._release_children()
        self._parameters = None
        self._set_value(self.field, None)
        logger.debug(f"Removed all items from list '{self.field.name}'")

    def move_item(self, current_index: int, new_index: int) -> None:
        """
        Move the item at current_index to new_index.

        Other items shift to make room. The parameter list object is
        reordered in place, so the owning form is not notified.
        """
        self._children.insert(new_index, self._children.pop(current_index))
        self._handles.insert(new_index, self._handles.pop(current_index))
        self._parameters.insert(new_index, self._parameters.pop(current_index))
        self._reindex(min(current_index, new_index),
                      min(max(current_index, new_index) + 1, len(self._handles)))
        logger.debug(f"Moved item {current_index} -> {new_index} in list '{self.field.name}'")

    def for_each_child(self, task: Callable[[Any], None]) -> None:
        """Run task on every child, in order."""
        for child in list(self._children):
            task(child)

    def remove(self) -> None:
        """Release all children when this list is itself removed."""
        self._release_children()

    # ==================== READINESS ====================

    def ready(self, callback: Callable[[], None]) -> None:
        """
        Run callback once the form is ready.

        Until the ancestor is ready the callback is handed up to it. After
        that, callbacks registered while a child is being constructed wait
        until that child exists; all others run immediately.
        """
        if not self._ancestor_ready.is_set:
            self.parent_field.ready(callback)
        elif self._constructing:
            self._pending_ready.append(callback)
        else:
            callback()

    def _flush_ready_callbacks(self) -> None:
        pending, self._pending_ready = self._pending_ready, []
        for callback in pending:
            callback()

    # ==================== VALIDATION ====================

    def validate(self) -> bool:
        """
        Validate every child and the item count.

        All children are validated even after a failure so each one can
        display its own errors.
        """
        self.clear_errors()

        valid = True
        for child in list(self._children):
            if child.validate() is False:
                valid = False

        item_count = len(self._parameters) if self._parameters is not None else 0
        field_max = self.field.max
        field_min = self.field.min
        label = self.field.display_label

        if field_max is not None and field_max > 0 and item_count > field_max:
            valid = False
            self.set_error(self.translator(EXCEEDS_MAX, {":property": label, ":max": field_max}))
        if field_min is not None and field_min > 0 and item_count < field_min:
            valid = False
            self.set_error(self.translator(EXCEEDS_MIN, {":property": label, ":min": field_min}))

        return valid

    # ==================== ERROR DISPLAY ====================

    @property
    def errors(self):
        return self._element.errors

    @property
    def has_errors(self) -> bool:
        return self._element.has_errors

    def set_error(self, message: str) -> None:
        self._element.set_error(message)

    def clear_errors(self) -> None:
        self._element.clear_errors()

    # ==================== RENDERING WIDGET ====================

    def change_widget(self, widget: ItemContainer) -> None:
        """Swap the rendering widget; every existing child is re-attached to it."""
        self.widget = widget
        self.widget_changed.emit(widget)

    def _attach_children(self, widget: ItemContainer) -> None:
        for child in self._children:
            widget.add_item(child)

    # ==================== HELPERS ====================

    def _is_full(self) -> bool:
        field_max = self.field.max
        return field_max is not None and field_max > 0 and len(self._children) >= field_max

    def _reindex(self, start: int, stop: int) -> None:
        for index in range(start, stop):
            self._index_by_handle[self._handles[index]] = index

    def _release_children(self) -> None:
        for child in self._children:
            child.remove()
        self._children = []
        self._handles = []
        self._index_by_handle.clear()
