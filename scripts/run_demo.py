import argparse
import json
from typing import Any, Dict, List

from recordquery.models.hotel import Availability, Hotel
from recordquery.services.grouping import group_records
from recordquery.services.hotel_search import search_hotels
from recordquery.utils.logger import setup_logger

logger = setup_logger(__name__)

# ----------------------------
# Sample data
# ----------------------------

SEED_BOOKINGS: List[Dict[str, Any]] = [
    {"id": 1, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 120, "nights": 2},
    {"id": 2, "category": "Flight", "location": {"city": "Tokyo", "country": "JP"}, "price": 450, "passengers": 1},
    {"id": 3, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 80, "nights": 3},
    {"id": 4, "category": "Hotel", "location": {"city": "Dubai", "country": "AE"}, "price": 200, "nights": 1},
    {"id": 5, "category": "Flight", "location": {"city": "Bangkok", "country": "TH"}, "price": 300, "passengers": 2},
]

SEED_HOTELS: List[Hotel] = [
    Hotel(id=1, name="Agoda Palace", city="Bangkok", price=120, rating=4.5, amenities=["WiFi", "Pool", "Gym"],
          availability=Availability(checkIn="2025-01-15", checkOut="2025-01-20")),
    Hotel(id=2, name="Seaside View", city="Phuket", price=80, rating=4.2, amenities=["WiFi", "Beach"],
          availability=Availability(checkIn="2025-01-10", checkOut="2025-01-25")),
    Hotel(id=3, name="Mountain Stay", city="Chiang Mai", price=100, rating=4.8, amenities=["WiFi", "Gym", "Spa"],
          availability=Availability(checkIn="2025-01-05", checkOut="2025-01-30")),
    Hotel(id=4, name="Urban Loft", city="Bangkok", price=150, rating=4.6, amenities=["WiFi", "Pool"],
          availability=Availability(checkIn="2025-01-12", checkOut="2025-01-18")),
    Hotel(id=5, name="Tropical Resort", city="Phuket", price=200, rating=4.9, amenities=["WiFi", "Pool", "Beach", "Spa"],
          availability=Availability(checkIn="2025-01-08", checkOut="2025-01-22")),
]

GROUP_SCENARIOS = [
    ("Basic grouping with sum/avg", {
        "groupBy": "category",
        "aggregations": {"price": "sum", "nights": "avg"},
        "sortBy": {"field": "price", "order": "desc"},
    }),
    ("Nested path grouping", {
        "groupBy": "location.city",
        "aggregations": {"price": "avg", "nights": "max"},
        "sortBy": {"field": "price", "order": "asc"},
    }),
    ("Composite keys", {
        "groupBy": ["category", "location.city"],
        "aggregations": {"price": "min"},
    }),
    ("With filter", {
        "groupBy": "category",
        "aggregations": {"price": "sum"},
        "preFilter": lambda item: item["price"] > 100,
    }),
]

SEARCH_SCENARIOS = [
    ("Price 100-150", {"priceRange": [100, 150]}, None),
    ("Pool and Spa", {"amenities": ["Pool", "Spa"]}, None),
    ("Bangkok by rating", {"search": "bangkok"}, {"field": "rating", "order": "desc"}),
    ("Stay in January 2025", {"dateRange": {"checkIn": "2025-01-19", "checkOut": "2025-01"}},
     {"field": "city", "order": "asc", "secondary": {"field": "price", "order": "desc"}}),
]

# ----------------------------
# Runners
# ----------------------------

def run_groups() -> None:
    for title, options in GROUP_SCENARIOS:
        print(f"\n=== {title} ===")
        groups = group_records(SEED_BOOKINGS, options)
        print(json.dumps([g.to_dict() for g in groups], indent=2))


def run_hotels(page_size: int) -> None:
    for title, criteria, sort in SEARCH_SCENARIOS:
        print(f"\n=== {title} ===")
        page = search_hotels(SEED_HOTELS, criteria, sort, page_size=page_size)
        print(page.model_dump_json(indent=2))


def main():
    ap = argparse.ArgumentParser(description="Print both query pipelines over the sample data")
    ap.add_argument("--pipeline", choices=["groups", "hotels", "all"], default="all")
    ap.add_argument("--page-size", type=int, default=10)
    args = ap.parse_args()

    if args.pipeline in ("groups", "all"):
        run_groups()
    if args.pipeline in ("hotels", "all"):
        run_hotels(args.page_size)
    logger.info("Demo complete.")


if __name__ == "__main__":
    main()
