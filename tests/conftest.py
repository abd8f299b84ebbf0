import pytest
from recordquery.services.hotel_search import load_hotels


@pytest.fixture
def bookings():
    """Mixed hotel/flight bookings with nested locations and sparse numeric fields."""
    return [
        {"id": 1, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 120, "nights": 2},
        {"id": 2, "category": "Flight", "location": {"city": "Tokyo", "country": "JP"}, "price": 450, "passengers": 1},
        {"id": 3, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 80, "nights": 3},
        {"id": 4, "category": "Hotel", "location": {"city": "Dubai", "country": "AE"}, "price": 200, "nights": 1},
        {"id": 5, "category": "Flight", "location": {"city": "Bangkok", "country": "TH"}, "price": 300, "passengers": 2},
    ]


@pytest.fixture
def raw_hotels():
    """Hotel records as a collaborator would pass them in."""
    return [
        {"id": 1, "name": "Agoda Palace", "city": "Bangkok", "price": 120, "rating": 4.5,
         "amenities": ["WiFi", "Pool", "Gym"], "availability": {"checkIn": "2025-01-15", "checkOut": "2025-01-20"}},
        {"id": 2, "name": "Seaside View", "city": "Phuket", "price": 80, "rating": 4.2,
         "amenities": ["WiFi", "Beach"], "availability": {"checkIn": "2025-01-10", "checkOut": "2025-01-25"}},
        {"id": 3, "name": "Mountain Stay", "city": "Chiang Mai", "price": 100, "rating": 4.8,
         "amenities": ["WiFi", "Gym", "Spa"], "availability": {"checkIn": "2025-01-05", "checkOut": "2025-01-30"}},
        {"id": 4, "name": "Urban Loft", "city": "Bangkok", "price": 150, "rating": 4.6,
         "amenities": ["WiFi", "Pool"], "availability": {"checkIn": "2025-01-12", "checkOut": "2025-01-18"}},
        {"id": 5, "name": "Tropical Resort", "city": "Phuket", "price": 200, "rating": 4.9,
         "amenities": ["WiFi", "Pool", "Beach", "Spa"], "availability": {"checkIn": "2025-01-08", "checkOut": "2025-01-22"}},
    ]


@pytest.fixture
def hotels(raw_hotels):
    """Validated Hotel models for the sample records."""
    return load_hotels(raw_hotels)


@pytest.fixture
def ids():
    """Helper to compare result order by record id."""
    def _ids(records):
        return [r["id"] if isinstance(r, dict) else r.id for r in records]
    return _ids
