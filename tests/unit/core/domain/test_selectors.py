"""Unit tests for derived todo values."""

import pytest

from todoflow.core.domain.selectors import (
    active_count,
    all_completed,
    completed_count,
    has_completed,
    items_left_label,
)
from todoflow.core.domain.todo import Todo


def test_counts(mixed_todos):
    assert active_count(mixed_todos) == 2
    assert completed_count(mixed_todos) == 1
    assert has_completed(mixed_todos) is True
    assert all_completed(mixed_todos) is False


def test_empty_list():
    assert active_count(()) == 0
    assert has_completed(()) is False
    assert all_completed(()) is False


def test_all_completed():
    todos = (Todo(id="a", title="A", completed=True),)
    assert all_completed(todos) is True


@pytest.mark.parametrize(
    ("count", "label"),
    [(0, "0 items left"), (1, "1 item left"), (2, "2 items left")],
)
def test_items_left_label(count, label):
    assert items_left_label(count) == label
