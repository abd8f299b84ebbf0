from __future__ import annotations

import json
from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from recordquery.errors import InputTypeError
from recordquery.models.grouping import GroupOptions, GroupSort
from recordquery.services.aggregation import Number, aggregate
from recordquery.utils.logger import setup_logger
from recordquery.utils.paths import MISSING, last_segment, resolve_path
from recordquery.utils.records import ensure_sequence

logger = setup_logger(__name__)

KEY_DELIMITER = "|"


def _freeze(value: Any) -> Any:
    """Hashable stand-in for a resolved value, used only for key equality."""
    if value is MISSING:
        return MISSING
    if isinstance(value, bool):
        # keeps True apart from 1 and False apart from 0
        return ("bool", value)
    if isinstance(value, (Mapping, list, tuple)):
        return ("json", json.dumps(value, sort_keys=True, default=str))
    if isinstance(value, Hashable):
        return value
    return ("repr", repr(value))


@dataclass(frozen=True)
class GroupKey:
    """Resolved group-by values in path order. MISSING marks an absent path."""
    values: Tuple[Any, ...] = field(compare=False)
    token: Tuple[Any, ...] = field(repr=False)

    def __str__(self) -> str:
        return KEY_DELIMITER.join("" if v is MISSING else str(v) for v in self.values)


def build_group_key(record: Mapping[str, Any], paths: Sequence[str]) -> GroupKey:
    values = tuple(resolve_path(record, p) for p in paths)
    return GroupKey(values=values, token=tuple(_freeze(v) for v in values))


@dataclass
class Group:
    """One partition of the input with its aggregate statistics."""
    key: GroupKey
    identity: Dict[str, Any]
    items: List[Mapping[str, Any]] = field(default_factory=list)
    aggregates: Dict[str, Optional[Number]] = field(default_factory=dict)

    @property
    def count(self) -> int:
        return len(self.items)

    def to_dict(self) -> Dict[str, Any]:
        """Flat shape handed to collaborators: identity fields, aggregates, items, count."""
        return {
            **self.identity,
            "aggregates": dict(self.aggregates),
            "items": list(self.items),
            "count": self.count,
        }


def build_group_options(options: Union[GroupOptions, Mapping[str, Any]]) -> GroupOptions:
    """Validate a raw options mapping, failing fast on configuration errors."""
    if isinstance(options, GroupOptions):
        return options
    if not isinstance(options, Mapping) or not (options.get("groupBy") or options.get("group_by")):
        raise InputTypeError("options.groupBy is required")
    return GroupOptions.model_validate(dict(options))


def _identity(paths: Sequence[str], key: GroupKey) -> Dict[str, Any]:
    # Paths sharing a last segment collapse; the later path wins.
    return {
        last_segment(p): (None if v is MISSING else v)
        for p, v in zip(paths, key.values)
    }


def partition(records: Sequence[Mapping[str, Any]], paths: Sequence[str]) -> List[Group]:
    """Single pass partition. Groups come back in first-seen order."""
    groups: Dict[Tuple[Any, ...], Group] = {}
    for record in records:
        key = build_group_key(record, paths)
        group = groups.get(key.token)
        if group is None:
            group = groups[key.token] = Group(key=key, identity=_identity(paths, key))
        group.items.append(record)
    return list(groups.values())


def sort_groups(groups: List[Group], sort: GroupSort) -> List[Group]:
    """
    Order groups by an aggregate value.

    With nulls="zero" a null aggregate compares as 0. With nulls="last" groups
    lacking the aggregate follow all others regardless of direction.
    """
    reverse = sort.order == "desc"

    def value(g: Group) -> Number:
        v = g.aggregates.get(sort.field)
        return 0 if v is None else v

    if sort.nulls == "zero":
        return sorted(groups, key=value, reverse=reverse)

    present = [g for g in groups if g.aggregates.get(sort.field) is not None]
    absent = [g for g in groups if g.aggregates.get(sort.field) is None]
    return sorted(present, key=value, reverse=reverse) + absent


def group_records(
    records: Sequence[Mapping[str, Any]],
    options: Union[GroupOptions, Mapping[str, Any]],
) -> List[Group]:
    """
    Filter, partition, aggregate and optionally sort records.

    Args:
        records: Records to group. Never mutated.
        options: GroupOptions or a mapping with groupBy, aggregations,
            sortBy and preFilter.

    Returns:
        List[Group]: first-seen order unless sortBy is given.

    Raises:
        InputTypeError: records is not a sequence or groupBy is missing.
        ConfigurationError: an aggregation kind is unknown.
    """
    ensure_sequence(records)
    opts = build_group_options(options)

    items = [r for r in records if opts.preFilter(r)] if opts.preFilter else list(records)

    groups = partition(items, opts.groupBy)
    for group in groups:
        group.aggregates = {
            agg_field: aggregate(group.items, agg_field, kind)
            for agg_field, kind in opts.aggregations.items()
        }

    if opts.sortBy is not None:
        groups = sort_groups(groups, opts.sortBy)

    logger.info(f"Grouped {len(items)} of {len(records)} records into {len(groups)} groups by {opts.groupBy}")
    return groups
