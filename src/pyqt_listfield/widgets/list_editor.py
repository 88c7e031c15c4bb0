"""
Default rendering widget for list fields.

Shows one row per child editor in a ReorderableListWidget, with buttons to
add and remove items. Dragging a row reorders the list field's children and
parameters through ListField.move_item().
"""

from abc import ABCMeta
from typing import Any, Optional, TYPE_CHECKING
import logging

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QListWidgetItem
)
from PyQt6.QtCore import Qt, pyqtSignal

from pyqt_listfield.core import ReorderableListWidget
from pyqt_listfield.protocols import ItemContainer

if TYPE_CHECKING:
    from pyqt_listfield.forms.list_field import ListField

logger = logging.getLogger(__name__)


class _ListEditorMeta(type(QWidget), ABCMeta):
    """Combined metaclass for ABC + PyQt6 QWidget."""
    pass


class ListEditorWidget(QWidget, ItemContainer, metaclass=_ListEditorMeta):
    """
    Row-per-item editor for a ListField.

    Creating the widget attaches it to the list field, which appends every
    existing child through add_item().
    """

    status_message = pyqtSignal(str)

    def __init__(self, list_field: "ListField", parent: Optional[QWidget] = None):
        super().__init__(parent)
        self.list_field = list_field

        self._setup_ui()
        self._setup_connections()

        list_field.change_widget(self)

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.title_label = QLabel(self.list_field.field.display_label)
        layout.addWidget(self.title_label)

        self.list_widget = ReorderableListWidget(self)
        layout.addWidget(self.list_widget)

        self.error_label = QLabel()
        self.error_label.setWordWrap(True)
        self.error_label.setVisible(False)
        layout.addWidget(self.error_label)

        button_row = QHBoxLayout()
        self.add_button = QPushButton(f"Add {self.list_field.get_entity()}")
        self.remove_button = QPushButton("Remove")
        button_row.addWidget(self.add_button)
        button_row.addWidget(self.remove_button)
        button_row.addStretch()
        layout.addLayout(button_row)

    def _setup_connections(self):
        self.add_button.clicked.connect(self._on_add_clicked)
        self.remove_button.clicked.connect(self._on_remove_clicked)
        self.list_widget.items_reordered.connect(self._on_items_reordered)

    # ========== ItemContainer ==========

    def add_item(self, child: Any) -> None:
        """Append a row for child, embedding it if it is a QWidget."""
        item = QListWidgetItem()
        item.setData(Qt.ItemDataRole.UserRole, child)
        self.list_widget.addItem(item)
        if isinstance(child, QWidget):
            item.setSizeHint(child.sizeHint())
            self.list_widget.setItemWidget(item, child)
        self._refresh_row_labels()

    # ========== User actions ==========

    def _on_add_clicked(self):
        if not self.list_field.add_item():
            entity = self.list_field.get_entity()
            self.status_message.emit(f"Cannot add more than {self.list_field.field.max} {entity}(s)")

    def _on_remove_clicked(self):
        row = self.list_widget.currentRow()
        if row < 0:
            return
        self.list_field.remove_item(row)
        self.list_widget.takeItem(row)
        self._refresh_row_labels()
        self.status_message.emit(f"Removed {self.list_field.get_entity()} {row + 1}")

    def _on_items_reordered(self, from_index: int, to_index: int):
        self.list_field.move_item(from_index, to_index)
        self._refresh_row_labels()

    # ========== Display ==========

    def row_count(self) -> int:
        return self.list_widget.count()

    def row_child(self, row: int) -> Any:
        return self.list_widget.item(row).data(Qt.ItemDataRole.UserRole)

    def show_errors(self) -> None:
        """Display the list field's current validation errors."""
        errors = self.list_field.errors
        self.error_label.setText("\n".join(errors))
        self.error_label.setVisible(bool(errors))

    def _refresh_row_labels(self):
        entity = self.list_field.get_entity().capitalize()
        for row in range(self.list_widget.count()):
            self.list_widget.item(row).setText(f"{entity} {row + 1}")
