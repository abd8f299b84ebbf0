from collections.abc import Sequence
from typing import Any

from recordquery.errors import InputTypeError


def ensure_sequence(records: Any, name: str = "records") -> Sequence:
    """Reject anything that is not a list-like collection of records."""
    if isinstance(records, (str, bytes)) or not isinstance(records, Sequence):
        raise InputTypeError(f"{name} must be a sequence of records, got {type(records).__name__}")
    return records
