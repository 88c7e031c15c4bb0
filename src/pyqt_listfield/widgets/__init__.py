"""
Rendering widgets for list fields.
"""

from .list_editor import ListEditorWidget

__all__ = [
    "ListEditorWidget",
]
