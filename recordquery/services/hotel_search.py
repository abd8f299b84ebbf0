from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Union

from recordquery.config import settings
from recordquery.models.criteria import FilterCriteria, SortSpec
from recordquery.models.hotel import Hotel
from recordquery.services.paginator import Page, paginate
from recordquery.services.record_filter import filter_records
from recordquery.services.record_sorter import sort_records
from recordquery.utils.logger import setup_logger
from recordquery.utils.records import ensure_sequence

logger = setup_logger(__name__)

HotelInput = Union[Hotel, Mapping[str, Any]]


def load_hotels(records: Sequence[HotelInput]) -> List[Hotel]:
    """Validate raw hotel mappings. Hotel instances pass through untouched."""
    ensure_sequence(records)
    return [r if isinstance(r, Hotel) else Hotel.model_validate(r) for r in records]


def default_criteria() -> FilterCriteria:
    """Filter state of a freshly reset dashboard."""
    return FilterCriteria(
        search="",
        priceRange=(settings.PRICE_FILTER_MIN, settings.PRICE_FILTER_MAX),
        amenities=[],
        minRating=0,
    )


def active_filter_count(criteria: FilterCriteria) -> int:
    """Number of filter groups narrowing the result beyond the reset state."""
    count = 0
    if criteria.search:
        count += 1
    if criteria.priceRange is not None:
        low, high = criteria.priceRange
        if low > settings.PRICE_FILTER_MIN or high < settings.PRICE_FILTER_MAX:
            count += 1
    if criteria.amenities:
        count += 1
    if criteria.minRating:
        count += 1
    if criteria.dateRange.checkIn or criteria.dateRange.checkOut:
        count += 1
    return count


def list_amenities(hotels: Iterable[HotelInput]) -> List[str]:
    """Every amenity offered by at least one hotel, sorted."""
    found = set()
    for hotel in hotels:
        amenities = hotel.amenities if isinstance(hotel, Hotel) else hotel.get("amenities") or []
        found.update(amenities)
    return sorted(found)


def search_hotels(
    records: Sequence[HotelInput],
    criteria: Optional[Union[FilterCriteria, Dict[str, Any]]] = None,
    sort: Optional[Union[SortSpec, Dict[str, Any]]] = None,
    page_size: int = settings.DEFAULT_PAGE_SIZE,
    page_number: int = 1,
) -> Page:
    """
    Filter, sort and paginate hotels.

    Args:
        records: Hotel models or raw hotel mappings.
        criteria: FilterCriteria or its dict form. None applies no filter.
        sort: SortSpec or its dict form. None sorts by price ascending.
        page_size: Records per page.
        page_number: 1-based page to return.

    Returns:
        Page: the requested slice; totalCount and totalPages describe the
        whole filtered result.
    """
    hotels = load_hotels(records)
    criteria = FilterCriteria.model_validate(criteria or {})
    sort = SortSpec.model_validate(sort or {})

    matched = filter_records(hotels, criteria)
    ordered = sort_records(matched, sort)
    page = paginate(ordered, page_size=page_size, page_number=page_number)

    logger.info(
        f"Search matched {page.totalCount}/{len(hotels)} hotels "
        f"({active_filter_count(criteria)} active filters); page {page_number}/{page.totalPages}"
    )
    return page
