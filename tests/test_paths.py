import pytest
from recordquery.utils.paths import MISSING, last_segment, resolve_path

RECORD = {
    "category": "Hotel",
    "location": {"city": "Bangkok", "geo": {"lat": 13.75}},
    "tags": ["a", "b"],
    "note": None,
}


@pytest.mark.parametrize("path, expected", [
    ("category", "Hotel"),
    ("location.city", "Bangkok"),
    ("location.geo.lat", 13.75),
    ("tags", ["a", "b"]),
    ("note", None),
])
def test_resolves_present_paths(path, expected):
    assert resolve_path(RECORD, path) == expected


@pytest.mark.parametrize("path", [
    "missing",
    "location.country",
    "location.city.name",   # walks into a string
    "tags.0",               # walks into a list
    "note.value",           # walks into None
    "",
])
def test_unresolvable_paths_are_missing(path):
    assert resolve_path(RECORD, path) is MISSING


def test_non_mapping_record_is_missing():
    assert resolve_path(None, "a") is MISSING
    assert resolve_path(42, "a.b") is MISSING


def test_missing_is_distinct_from_none():
    assert MISSING is not None
    assert MISSING != None  # noqa: E711
    assert not MISSING
    assert repr(MISSING) == "<missing>"


def test_last_segment():
    assert last_segment("location.city") == "city"
    assert last_segment("category") == "category"
