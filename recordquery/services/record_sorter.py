from __future__ import annotations

from typing import Any, Callable, Iterable, List

from recordquery.errors import ConfigurationError
from recordquery.models.criteria import SORTABLE_FIELDS, SecondarySort, SortableField, SortSpec
from recordquery.models.hotel import Hotel


def sort_key(field: str) -> Callable[[Hotel], Any]:
    """Comparator key for a field, chosen by its declared type."""
    field_type = SORTABLE_FIELDS.get(field)
    if field_type is None:
        raise ConfigurationError(f"Field '{field}' has no defined ordering")
    if field_type == "numeric":
        return lambda hotel: float(getattr(hotel, field))
    return lambda hotel: str(getattr(hotel, field))


def sort_records(hotels: Iterable[Hotel], spec: SortSpec) -> List[Hotel]:
    """
    Stable two-level sort.

    The secondary pass runs first so the stable primary pass only reorders
    across different primary values. Records tied on both keys keep their
    input order.
    """
    ordered = list(hotels)
    if spec.secondary is not None:
        ordered.sort(key=sort_key(spec.secondary.field), reverse=spec.secondary.order == "desc")
    ordered.sort(key=sort_key(spec.field), reverse=spec.order == "desc")
    return ordered


def toggle_sort(current: SortSpec, field: SortableField) -> SortSpec:
    """
    Next sort after a column header click.

    Clicking the current field flips asc to desc (anything else back to asc).
    Clicking another field sorts it ascending and demotes the previous
    primary to the tie-break.
    """
    if current.field == field:
        return SortSpec(field=field, order="desc" if current.order == "asc" else "asc")
    return SortSpec(
        field=field,
        order="asc",
        secondary=SecondarySort(field=current.field, order=current.order),
    )
