"""
pyqt-listfield: Repeatable list fields for schema-driven PyQt6 form editors.

A list field owns an ordered collection of child field editors, each bound to
one slot of a backing parameter list that is shared with the owning form.

Architecture:
- Tier 1 (Core): One-shot readiness event and the reorderable QListWidget
- Tier 2 (Protocols): Field editor ABCs and global configuration
- Tier 3 (Forms): FieldSchema, FieldRegistry and the ListField controller
- Tier 4 (Widgets): ListEditorWidget, the default rendering widget

Key Features:
- Cardinality bounds (min/max/defaultNum) with validation messages
- Stable child handles so write-backs survive reordering
- Deferred readiness propagation through nested lists
- Explicit, injectable child-type registry (no process-wide state)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
