from typing import Any, Mapping


class _Missing:
    """Marker for a field path that does not resolve on a record."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<missing>"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Missing, ())


MISSING = _Missing()


def split_path(path: str) -> list:
    """Split a dot-notation path like 'location.city' into its segments."""
    return path.split(".")


def last_segment(path: str) -> str:
    return split_path(path)[-1]


def resolve_path(record: Any, path: str) -> Any:
    """
    Walk a dot-notation path through nested mappings.

    Returns MISSING when any segment is absent or an intermediate value is not
    a mapping. Never raises.
    """
    current = record
    for segment in split_path(path):
        if not isinstance(current, Mapping) or segment not in current:
            return MISSING
        current = current[segment]
    return current
