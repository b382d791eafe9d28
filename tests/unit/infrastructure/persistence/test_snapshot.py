"""
Unit tests for the snapshot codec.

Tests verify:
- Round-trip of valid lists (order and fields preserved)
- Record repair rules
- Corrupt payloads degrade to an empty list
"""

import json

import pytest
from structlog.testing import capture_logs

from todoflow.core.domain.todo import Todo
from todoflow.infrastructure.persistence.snapshot import dump_snapshot, parse_snapshot


def test_round_trip(mixed_todos):
    assert parse_snapshot(dump_snapshot(mixed_todos)) == mixed_todos


def test_round_trip_empty_list():
    assert parse_snapshot(dump_snapshot(())) == ()


def test_round_trip_unicode():
    todos = (Todo(id="u", title="Café ☕ 日本"),)

    text = dump_snapshot(todos)

    assert "☕" in text
    assert parse_snapshot(text) == todos


def test_dump_is_json_array():
    data = json.loads(dump_snapshot((Todo(id="a", title="A", completed=True),)))

    assert data == [{"id": "a", "title": "A", "completed": True}]


def test_missing_completed_defaults_to_false():
    payload = json.dumps([{"id": "a", "title": "A"}, {"id": "b", "title": "B", "completed": None}])

    assert parse_snapshot(payload) == (
        Todo(id="a", title="A", completed=False),
        Todo(id="b", title="B", completed=False),
    )


@pytest.mark.parametrize(
    "record",
    [
        {"id": "x"},
        {"id": "x", "title": ""},
        {"id": "x", "title": "   "},
        {"id": "x", "title": None},
        {"title": "No id"},
        {"id": "", "title": "Blank id"},
        {"id": 7, "title": "Numeric id"},
        "not a record",
        None,
    ],
)
def test_invalid_records_are_dropped(record):
    payload = json.dumps([{"id": "keep", "title": "Keep"}, record])

    assert parse_snapshot(payload) == (Todo(id="keep", title="Keep"),)


def test_titles_are_trimmed_and_extra_fields_ignored():
    payload = json.dumps([{"id": "a", "title": "  A  ", "completed": True, "extra": 1}])

    assert parse_snapshot(payload) == (Todo(id="a", title="A", completed=True),)


def test_duplicate_ids_keep_first():
    payload = json.dumps(
        [
            {"id": "a", "title": "First"},
            {"id": "b", "title": "Other"},
            {"id": "a", "title": "Second"},
        ]
    )

    assert parse_snapshot(payload) == (Todo(id="a", title="First"), Todo(id="b", title="Other"))


@pytest.mark.parametrize(
    "payload",
    [None, "", "{not json", "null", '{"todos": []}', '"text"', "42"],
)
def test_unreadable_payload_yields_empty_list(payload):
    assert parse_snapshot(payload) == ()


def test_corrupt_payload_is_logged():
    with capture_logs() as logs:
        parse_snapshot("{not json")

    assert any(entry["event"] == "todo_snapshot_corrupt" for entry in logs)


def test_record_without_title_is_dropped():
    payload = json.dumps([{"id": "x", "completed": True}])

    with capture_logs() as logs:
        assert parse_snapshot(payload) == ()

    assert any(entry["event"] == "todo_record_dropped" for entry in logs)


@pytest.mark.parametrize(
    "payload",
    ["[" * 100000, "[" * 100000 + "]" * 100000, '{"a":' * 100000],
)
def test_deeply_nested_payload_yields_empty_list(payload):
    with capture_logs() as logs:
        assert parse_snapshot(payload) == ()

    assert any(entry["event"] == "todo_snapshot_corrupt" for entry in logs)
