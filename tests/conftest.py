"""pytest configuration and fixtures for pyqt-listfield tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_listfield.forms.field_registry import create_default_registry
from pyqt_listfield.forms.field_schema import FieldSchema
from pyqt_listfield.forms.root_form import RootForm
from pyqt_listfield.protocols import FieldEditor, set_list_config


class FakeField(FieldEditor):
    """Child editor that records what the list field does to it."""

    def __init__(self, parent, field, params, set_value):
        self.parent = parent
        self.field = field
        self.value = params
        self._set_value = set_value
        self.valid = True
        self.validate_calls = 0
        self.removed = False

    def set(self, value):
        self.value = value
        self._set_value(self.field, value)

    def validate(self):
        self.validate_calls += 1
        return self.valid

    def remove(self):
        self.removed = True


class RecordingForm(RootForm):
    """RootForm that keeps every set_value call."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.set_value_calls = []

    def set_value(self, field, value=None):
        self.set_value_calls.append((field.name, value))
        super().set_value(field, value)


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def reset_list_config():
    yield
    set_list_config(None)


@pytest.fixture
def registry():
    registry = create_default_registry()
    registry.register("text", FakeField)
    return registry


@pytest.fixture
def form(registry):
    return RecordingForm(registry=registry)


@pytest.fixture
def make_list(qapp, form):
    """Build a ListField under the recording form."""

    def _make(child=None, params=None, **list_kwargs):
        child_schema = child or FieldSchema(name="tag", type="text")
        schema = FieldSchema(name="tags", type="list", label="Tags", field=child_schema, **list_kwargs)
        if params is not None:
            form.params[schema.name] = params
        return form.create_field(schema)

    return _make

