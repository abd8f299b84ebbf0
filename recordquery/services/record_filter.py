from __future__ import annotations

from typing import Iterable, List

from recordquery.models.criteria import DateRangeQuery, FilterCriteria
from recordquery.models.hotel import Hotel
from recordquery.services.date_ranges import (
    DateInterval,
    availability_interval,
    overlaps,
    parse_partial_date,
)
from recordquery.utils.logger import setup_logger

logger = setup_logger(__name__)


def matches_search(hotel: Hotel, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in hotel.name.lower() or needle in hotel.city.lower()


def matches_price(hotel: Hotel, criteria: FilterCriteria) -> bool:
    if criteria.priceRange is None:
        return True
    low, high = criteria.priceRange
    return low <= hotel.price <= high


def matches_amenities(hotel: Hotel, required: Iterable[str]) -> bool:
    offered = set(hotel.amenities)
    return all(a in offered for a in required)


def matches_rating(hotel: Hotel, criteria: FilterCriteria) -> bool:
    return criteria.minRating is None or hotel.rating >= criteria.minRating


def requested_interval(date_range: DateRangeQuery) -> DateInterval | None:
    """
    Interval a check-in/check-out request covers, or None when it is unusable.

    With both ends given the check-in must start strictly before the
    check-out ends.
    """
    check_in = parse_partial_date(date_range.checkIn) if date_range.checkIn else None
    check_out = parse_partial_date(date_range.checkOut) if date_range.checkOut else None

    if date_range.checkIn and date_range.checkOut:
        if check_in is None or check_out is None:
            return None
        if check_in.start >= check_out.end:
            logger.debug(f"Inverted date range: {date_range.checkIn} -> {date_range.checkOut}")
            return None
        return DateInterval(check_in.start, check_out.end)
    return check_in or check_out


def matches_dates(hotel: Hotel, date_range: DateRangeQuery) -> bool:
    if not date_range.checkIn and not date_range.checkOut:
        return True
    requested = requested_interval(date_range)
    if requested is None:
        return False
    return overlaps(requested, availability_interval(hotel.availability))


def matches(hotel: Hotel, criteria: FilterCriteria) -> bool:
    """True when the hotel satisfies every active criterion."""
    return (
        matches_search(hotel, criteria.search)
        and matches_price(hotel, criteria)
        and matches_amenities(hotel, criteria.amenities)
        and matches_rating(hotel, criteria)
        and matches_dates(hotel, criteria.dateRange)
    )


def filter_records(hotels: Iterable[Hotel], criteria: FilterCriteria) -> List[Hotel]:
    """Hotels matching `criteria`, in input order."""
    return [h for h in hotels if matches(h, criteria)]
