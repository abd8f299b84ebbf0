from typing import Dict, List, Literal, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict

SortOrder = Literal["asc", "desc"]

# Hotel fields with a total order. amenities and availability have none.
SortableField = Literal["id", "name", "city", "price", "rating"]

FieldType = Literal["numeric", "text"]

SORTABLE_FIELDS: Dict[str, FieldType] = {
    "id": "numeric",
    "name": "text",
    "city": "text",
    "price": "numeric",
    "rating": "numeric",
}


class DateRangeQuery(BaseModel):
    """Requested stay as partial dates (YYYY, YYYY-MM or YYYY-MM-DD)."""
    model_config = ConfigDict(extra="forbid")

    checkIn: str = ""
    checkOut: str = ""


class FilterCriteria(BaseModel):
    """
    Conjunction of hotel filters. An unset field imposes no constraint.
    """
    model_config = ConfigDict(extra="forbid")

    search: str = Field("", description="Case-insensitive substring of name or city")
    priceRange: Optional[Tuple[float, float]] = Field(None, description="Inclusive [min, max] price")
    amenities: List[str] = Field(default_factory=list, description="Amenities a hotel must all offer")
    minRating: Optional[float] = None
    dateRange: DateRangeQuery = Field(default_factory=DateRangeQuery)


class SecondarySort(BaseModel):
    """Tie-break applied only when the primary field compares equal."""
    model_config = ConfigDict(extra="forbid")

    field: SortableField
    order: SortOrder = "asc"


class SortSpec(BaseModel):
    """Primary sort field and direction with an optional tie-break."""
    model_config = ConfigDict(extra="forbid")

    field: SortableField = "price"
    order: SortOrder = "asc"
    secondary: Optional[SecondarySort] = None
