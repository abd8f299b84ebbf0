from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, get_args
from pydantic import AliasChoices, BaseModel, Field, ConfigDict, field_validator

from recordquery.errors import ConfigurationError
from recordquery.models.criteria import SortOrder

AggregationKind = Literal["sum", "avg", "min", "max", "count"]

AGGREGATION_KINDS = get_args(AggregationKind)

# How groups with a null aggregate compare when sorting.
# "zero" treats null as 0; "last" places them after every real value.
NullOrder = Literal["zero", "last"]


class GroupSort(BaseModel):
    """Order groups by one of their aggregate values."""
    model_config = ConfigDict(extra="forbid")

    field: str = Field(..., description="Aggregated field name, e.g. 'price'")
    order: SortOrder = "asc"
    nulls: NullOrder = "zero"


class GroupOptions(BaseModel):
    """
    Declarative grouping request: WHAT to partition by and summarise.

    Option names are accepted in camelCase or snake_case.
    """
    model_config = ConfigDict(extra="forbid")

    groupBy: List[str] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("groupBy", "group_by"),
        description="Field path(s) forming the group key, e.g. 'category' or ['category', 'location.city']"
    )
    aggregations: Dict[str, AggregationKind] = Field(
        default_factory=dict,
        description="Field path -> aggregation kind"
    )
    sortBy: Optional[GroupSort] = Field(None, validation_alias=AliasChoices("sortBy", "sort_by"))
    preFilter: Optional[Callable[[Mapping[str, Any]], bool]] = Field(
        None,
        validation_alias=AliasChoices("preFilter", "pre_filter"),
        description="Predicate applied to every record before grouping"
    )

    @field_validator("groupBy", mode="before")
    @classmethod
    def _wrap_single_path(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("aggregations", mode="before")
    @classmethod
    def _check_kinds(cls, value: Any) -> Any:
        # Propagates as ConfigurationError, not ValidationError.
        if isinstance(value, Mapping):
            for agg_field, kind in value.items():
                if kind not in AGGREGATION_KINDS:
                    raise ConfigurationError(f"Unknown aggregation '{kind}' for field '{agg_field}'")
        return value
