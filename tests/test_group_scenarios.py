"""
test_group_scenarios.py

End-to-end grouping scenarios over the sample bookings, one per option
combination the dashboard uses.
"""
import json
import unittest

from recordquery.services.grouping import group_records

BOOKINGS = [
    {"id": 1, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 120, "nights": 2},
    {"id": 2, "category": "Flight", "location": {"city": "Tokyo", "country": "JP"}, "price": 450, "passengers": 1},
    {"id": 3, "category": "Hotel", "location": {"city": "Bangkok", "country": "TH"}, "price": 80, "nights": 3},
    {"id": 4, "category": "Hotel", "location": {"city": "Dubai", "country": "AE"}, "price": 200, "nights": 1},
    {"id": 5, "category": "Flight", "location": {"city": "Bangkok", "country": "TH"}, "price": 300, "passengers": 2},
]


class TestGroupScenarios(unittest.TestCase):

    def test_category_totals_sorted_desc(self):
        """
        Scenario: Group by category with price sum and nights avg, sorted by price desc.
        Goal: Flight (750) comes before Hotel (400); flights have no nights so avg is null.
        """
        groups = group_records(BOOKINGS, {
            "groupBy": "category",
            "aggregations": {"price": "sum", "nights": "avg"},
            "sortBy": {"field": "price", "order": "desc"},
        })
        out = [g.to_dict() for g in groups]

        self.assertEqual([g["category"] for g in out], ["Flight", "Hotel"])
        self.assertEqual(out[0]["aggregates"], {"price": 750, "nights": None})
        self.assertEqual(out[1]["aggregates"], {"price": 400, "nights": 2.0})
        self.assertEqual([g["count"] for g in out], [2, 3])

    def test_nested_city_grouping(self):
        """
        Scenario: Group by the nested path location.city.
        Goal: Identity is keyed by the last segment ('city') and output is JSON-serialisable.
        """
        groups = group_records(BOOKINGS, {
            "groupBy": "location.city",
            "aggregations": {"price": "avg", "nights": "max"},
            "sortBy": {"field": "price", "order": "asc"},
        })
        out = [g.to_dict() for g in groups]

        self.assertEqual([g["city"] for g in out], ["Bangkok", "Dubai", "Tokyo"])
        self.assertEqual(out[0]["aggregates"]["nights"], 3)
        self.assertEqual(out[1]["aggregates"], {"price": 200.0, "nights": 1})
        json.dumps(out)

    def test_composite_keys(self):
        """
        Scenario: Group by category AND city.
        Goal: Bangkok hotels and Bangkok flights land in different groups.
        """
        groups = group_records(BOOKINGS, {
            "groupBy": ["category", "location.city"],
            "aggregations": {"price": "min"},
        })
        keys = [str(g.key) for g in groups]

        self.assertEqual(keys, ["Hotel|Bangkok", "Flight|Tokyo", "Hotel|Dubai", "Flight|Bangkok"])
        self.assertEqual(groups[0].aggregates["price"], 80)

    def test_pre_filter(self):
        """
        Scenario: Only bookings over 100 are grouped.
        Goal: The 80 Bangkok hotel is excluded from the Hotel total.
        """
        groups = group_records(BOOKINGS, {
            "groupBy": "category",
            "aggregations": {"price": "sum"},
            "preFilter": lambda item: item["price"] > 100,
        })
        totals = {g.identity["category"]: (g.aggregates["price"], g.count) for g in groups}

        self.assertEqual(totals, {"Hotel": (320, 2), "Flight": (750, 2)})


if __name__ == '__main__':
    unittest.main()
