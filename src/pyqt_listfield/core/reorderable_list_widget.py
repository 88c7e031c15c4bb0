"""
Reorderable QListWidget for list field rows.

Rows can be dragged to a new position; the widget reports the move so the
owning list field can reorder its children and parameters in lockstep.
"""

from PyQt6.QtWidgets import QListWidget
from PyQt6.QtCore import pyqtSignal, Qt


class ReorderableListWidget(QListWidget):
    """QListWidget that reports drag-and-drop moves as index pairs.

    Only the visual row moves; whoever listens to ``items_reordered`` is
    responsible for updating the data model.
    """

    items_reordered = pyqtSignal(int, int)  # from_index, to_index

    def __init__(self, parent=None):
        super().__init__(parent)
        self.setDragDropMode(QListWidget.DragDropMode.InternalMove)
        self.setDefaultDropAction(Qt.DropAction.MoveAction)
        self.setSelectionMode(QListWidget.SelectionMode.SingleSelection)

    def dropEvent(self, event):
        """Handle drop event and emit signal with indices."""
        source_items = self.selectedItems()
        if not source_items:
            super().dropEvent(event)
            return

        source_index = self.row(source_items[0])
        super().dropEvent(event)
        target_index = self.row(source_items[0])

        if source_index != target_index:
            self.items_reordered.emit(source_index, target_index)
