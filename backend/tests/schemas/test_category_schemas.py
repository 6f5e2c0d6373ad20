"""Category Schemas — payload normalization and response aliasing.

Tests:
    - Name trimmed and bounded to 2-50 characters
    - Empty icon and zero parent normalized to None
    - Color pattern enforced; optional on create, required on update
    - Responses serialize with camelCase keys
"""

import pytest
from pydantic import ValidationError

from app.schemas.category import (
    Category, CategoryCreate, CategoryResult, CategoryUpdate,
)


def test_create_trims_name():
    assert CategoryCreate(name="  Work  ").name == "Work"


@pytest.mark.parametrize("name", ["", "   ", "W", " W ", "x" * 51])
def test_create_rejects_bad_names(name):
    with pytest.raises(ValidationError):
        CategoryCreate(name=name)


def test_create_accepts_boundary_lengths():
    assert CategoryCreate(name="ab").name == "ab"
    assert len(CategoryCreate(name="x" * 50).name) == 50


def test_create_normalizes_optional_fields():
    payload = CategoryCreate.model_validate(
        {"name": "Work", "icon": "", "idParent": 0},
    )
    assert payload.icon is None
    assert payload.id_parent is None
    assert payload.color is None


def test_create_rejects_invalid_color():
    with pytest.raises(ValidationError):
        CategoryCreate(name="Work", color="#GGGGGG")


def test_create_rejects_long_icon():
    with pytest.raises(ValidationError):
        CategoryCreate(name="Work", icon="i" * 51)


def test_update_requires_color():
    with pytest.raises(ValidationError):
        CategoryUpdate.model_validate({"name": "Work"})


def test_update_has_no_parent():
    payload = CategoryUpdate.model_validate(
        {"name": "Work", "color": "#3498db", "idParent": 4},
    )
    assert not hasattr(payload, "id_parent")


def test_category_reads_procedure_row():
    cat = Category.model_validate({
        "idCategory": 3, "name": "Work", "color": "#3498db",
        "idParent": 1, "level": 1, "isDefault": False, "taskCount": 5,
        "extraColumn": "ignored",
    })
    assert cat.id_parent == 1
    assert cat.task_count == 5


def test_responses_serialize_camel_case():
    assert CategoryResult(id_category=3).model_dump(by_alias=True) == {
        "idCategory": 3,
    }
    dumped = Category(id_category=3, name="Work", color="#3498db").model_dump(
        by_alias=True,
    )
    assert {"idParent", "isDefault", "taskCount", "dateCreated"} <= set(dumped)
