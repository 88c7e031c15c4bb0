"""Tests for FieldSchema."""

import dataclasses

import pytest

from pyqt_listfield.forms import FieldSchema, SchemaError


def test_from_semantics_builds_nested_schema():
    schema = FieldSchema.from_semantics({
        "name": "answers",
        "type": "list",
        "label": "Answers",
        "entity": "answer",
        "min": 1,
        "max": 4,
        "defaultNum": 2,
        "field": {"name": "answer", "type": "text", "default": "?"},
    })

    assert schema.default_num == 2
    assert schema.entity == "answer"
    assert schema.field == FieldSchema(name="answer", type="text", default="?")
    assert schema.is_list


def test_from_semantics_ignores_unknown_keys():
    schema = FieldSchema.from_semantics({"name": "title", "importance": "high"})
    assert schema == FieldSchema(name="title")


def test_list_without_child_field_rejected():
    with pytest.raises(SchemaError):
        FieldSchema.from_semantics({"name": "answers", "type": "list"})


def test_missing_name_rejected():
    with pytest.raises(ValueError):
        FieldSchema.from_semantics({"type": "text"})


def test_widget_name_prefers_widget_over_type():
    assert FieldSchema(name="a", type="text").widget_name == "text"
    assert FieldSchema(name="a", type="list", widget="tags").widget_name == "tags"


def test_display_label_falls_back_to_name():
    assert FieldSchema(name="a").display_label == "a"
    assert FieldSchema(name="a", label="A").display_label == "A"


def test_effective_default_num_does_not_mutate_schema():
    schema = FieldSchema(name="a", type="list", min=3, field=FieldSchema(name="b"))
    assert schema.effective_default_num() == 3
    assert schema.default_num is None
    assert FieldSchema(name="a", default_num=0, min=3).effective_default_num() == 0
    assert FieldSchema(name="a").effective_default_num(fallback=5) == 5


def test_schema_is_frozen():
    schema = FieldSchema(name="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        schema.min = 2
