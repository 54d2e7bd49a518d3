# tests/test_validation.py
from __future__ import annotations

import pytest

from todoapp.models.entities import TodoItem
from todoapp.models.errors import ValidationFailed
from todoapp.services.validation import is_valid, require_valid


@pytest.mark.parametrize(
    "title,description,ok",
    [
        ("Buy milk", "2 litres", True),
        ("", "2 litres", False),
        ("Buy milk", "", False),
        ("", "", False),
        (" ", "\t", True),     # whitespace is not trimmed
    ],
)
def test_is_valid(title, description, ok):
    assert is_valid(title, description) is ok


def test_require_valid_names_missing_fields():
    with pytest.raises(ValidationFailed) as exc:
        require_valid(TodoItem(0, "", ""))
    assert exc.value.fields == ("title", "description")

    with pytest.raises(ValidationFailed) as exc:
        require_valid(TodoItem(0, "t", ""))
    assert exc.value.fields == ("description",)

    require_valid(TodoItem(0, "t", "d"))
