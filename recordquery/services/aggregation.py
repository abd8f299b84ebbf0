from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Union

from recordquery.errors import ConfigurationError
from recordquery.models.grouping import AggregationKind
from recordquery.utils.logger import setup_logger
from recordquery.utils.paths import resolve_path

logger = setup_logger(__name__)

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """True for int/float values. bool is excluded even though it subclasses int."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _avg(values: List[Number]) -> float:
    return sum(values) / len(values)


# Every AggregationKind must have an entry here.
AGGREGATORS: Dict[str, Callable[[List[Number]], Number]] = {
    "sum": sum,
    "avg": _avg,
    "min": min,
    "max": max,
    "count": len,
}


def numeric_values(records: Iterable[Mapping[str, Any]], field: str) -> List[Number]:
    """Resolve `field` on each record, keeping only numeric results."""
    return [v for v in (resolve_path(r, field) for r in records) if is_number(v)]


def aggregate(records: Iterable[Mapping[str, Any]], field: str, kind: AggregationKind) -> Optional[Number]:
    """
    Compute one statistic over the numeric values of `field`.

    Records where the path is missing or holds a non-number are skipped, so
    "count" is the number of numeric values, not the number of records.
    Returns None when no record supplies a number.
    """
    func = AGGREGATORS.get(kind)
    if func is None:
        raise ConfigurationError(f"Unknown aggregation '{kind}' for field '{field}'")

    values = numeric_values(records, field)
    if not values:
        logger.debug(f"No numeric values for '{field}' ({kind}); aggregate is null")
        return None
    return func(values)
