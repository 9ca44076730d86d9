from django.test import SimpleTestCase

from marketplace.services.proximity import (
    Coordinate,
    VendorSnapshot,
    coerce_coordinate,
    filter_ranked,
    haversine_miles,
    normalize_tags,
    rank,
)

INDY = Coordinate(39.7684, -86.1581)
# One degree of latitude on a 3959 mile sphere.
MILES_PER_DEGREE_LAT = 69.0976


def snapshot(name, status="live", latitude=None, longitude=None, cuisine_types=()):
    return VendorSnapshot(
        vendor_id=name,
        name=name,
        operational_status=status,
        cuisine_types=tuple(cuisine_types),
        latitude=latitude,
        longitude=longitude,
    )


def north_of(origin, miles):
    return origin.latitude + miles / MILES_PER_DEGREE_LAT, origin.longitude


class HaversineTests(SimpleTestCase):
    def test_distance_to_self_is_zero(self):
        self.assertEqual(haversine_miles(INDY, INDY), 0)

    def test_distance_is_symmetric(self):
        pairs = [
            (INDY, Coordinate(41.8781, -87.6298)),
            (Coordinate(-33.8688, 151.2093), Coordinate(51.5074, -0.1278)),
            (Coordinate(0, 179.9), Coordinate(0, -179.9)),
        ]
        for a, b in pairs:
            self.assertAlmostEqual(haversine_miles(a, b), haversine_miles(b, a), places=9)

    def test_known_distance_indianapolis_to_chicago(self):
        distance = haversine_miles(INDY, Coordinate(41.8781, -87.6298))
        self.assertAlmostEqual(distance, 164.8, delta=1.0)

    def test_antipodal_points_do_not_fail(self):
        distance = haversine_miles(Coordinate(0, 0), Coordinate(0, 180))
        self.assertAlmostEqual(distance, 3959 * 3.141592653589793, places=3)


class CoerceCoordinateTests(SimpleTestCase):
    def test_accepts_numeric_strings(self):
        self.assertEqual(coerce_coordinate("39.5", "-86.25"), Coordinate(39.5, -86.25))

    def test_rejects_malformed_values(self):
        for lat, lon in [(None, 1), ("abc", 1), (float("nan"), 1), (1, float("inf")), (91, 0), (0, -181), ("", "")]:
            self.assertIsNone(coerce_coordinate(lat, lon), (lat, lon))


class RankTests(SimpleTestCase):
    def test_empty_candidates(self):
        self.assertEqual(rank(INDY, []), [])

    def test_live_vendor_ranks_before_nearer_offline_vendor(self):
        vendor_a = snapshot("A", "live", 39.77, -86.15)
        vendor_b = snapshot("B", "offline", 39.0, -85.0)
        ranked = rank(INDY, [vendor_b, vendor_a])
        self.assertEqual([item.vendor_id for item in ranked], ["A", "B"])

    def test_liveness_dominates_distance(self):
        far_live = snapshot("far", "live", *north_of(INDY, 50))
        near_offline = snapshot("near", "offline", *north_of(INDY, 1))
        closing = snapshot("closing", "closing_soon", *north_of(INDY, 30))
        ranked = rank(INDY, [near_offline, far_live, closing])
        self.assertEqual([item.vendor_id for item in ranked], ["closing", "far", "near"])

    def test_live_vendors_sorted_nearest_first(self):
        farther = snapshot("farther", "live", *north_of(INDY, 2.3))
        nearer = snapshot("nearer", "live", *north_of(INDY, 0.9))
        ranked = rank(INDY, [farther, nearer])
        self.assertEqual([item.vendor_id for item in ranked], ["nearer", "farther"])
        self.assertAlmostEqual(ranked[0].distance_miles, 0.9, places=2)
        self.assertAlmostEqual(ranked[1].distance_miles, 2.3, places=2)

    def test_vendors_without_distance_sort_last_within_bucket(self):
        no_location = snapshot("nowhere", "live")
        located = snapshot("here", "live", *north_of(INDY, 10))
        offline_located = snapshot("offline", "offline", *north_of(INDY, 1))
        offline_nowhere = snapshot("offline-nowhere", "offline")
        ranked = rank(INDY, [offline_nowhere, no_location, offline_located, located])
        self.assertEqual(
            [item.vendor_id for item in ranked],
            ["here", "nowhere", "offline", "offline-nowhere"],
        )
        self.assertIsNone(ranked[1].distance_miles)

    def test_malformed_coordinates_mean_no_distance(self):
        broken = [
            snapshot("text", "live", "abc", "-86.1"),
            snapshot("nan", "live", float("nan"), -86.1),
            snapshot("range", "live", 123.0, -86.1),
            snapshot("half", "live", 39.7, None),
        ]
        ranked = rank(INDY, broken)
        self.assertEqual(len(ranked), 4)
        self.assertTrue(all(item.distance_miles is None for item in ranked))

    def test_ties_keep_input_order(self):
        lat, lon = north_of(INDY, 3)
        first = snapshot("first", "live", lat, lon)
        second = snapshot("second", "live", lat, lon)
        third = snapshot("third", "offline")
        fourth = snapshot("fourth", "offline")
        ranked = rank(INDY, [first, third, second, fourth])
        self.assertEqual(
            [item.vendor_id for item in ranked], ["first", "second", "third", "fourth"]
        )

    def test_unknown_status_is_not_treated_as_serving(self):
        ranked = rank(INDY, [snapshot("weird", "paused", *north_of(INDY, 1)), snapshot("live", "live")])
        self.assertEqual([item.vendor_id for item in ranked], ["live", "weird"])


class FilterRankedTests(SimpleTestCase):
    def setUp(self):
        self.ranked = rank(
            INDY,
            [
                snapshot("taqueria", "live", *north_of(INDY, 2), cuisine_types=["Mexican", "BBQ"]),
                snapshot("pizza", "live", *north_of(INDY, 1), cuisine_types=["Italian"]),
                snapshot("smoke", "offline", cuisine_types=["BBQ"]),
            ],
        )

    def test_cuisine_filter_keeps_intersecting_tags(self):
        results = filter_ranked(self.ranked, cuisines={"Mexican"})
        self.assertEqual([item.vendor_id for item in results], ["taqueria"])

    def test_empty_selection_keeps_everything(self):
        self.assertEqual(filter_ranked(self.ranked), self.ranked)
        self.assertEqual(filter_ranked(self.ranked, cuisines=[]), self.ranked)

    def test_live_only_drops_offline(self):
        results = filter_ranked(self.ranked, live_only=True)
        self.assertEqual([item.vendor_id for item in results], ["pizza", "taqueria"])

    def test_filters_preserve_order_and_distances(self):
        results = filter_ranked(self.ranked, live_only=True, cuisines=["BBQ", "Italian"])
        self.assertEqual([item.vendor_id for item in results], ["pizza", "taqueria"])
        self.assertEqual(
            [item.distance_miles for item in results],
            [item.distance_miles for item in self.ranked[:2]],
        )

    def test_length_matches_input_minus_removed(self):
        results = filter_ranked(self.ranked, cuisines=["BBQ"])
        removed = [item for item in self.ranked if "BBQ" not in item.snapshot.cuisine_types]
        self.assertEqual(len(results), len(self.ranked) - len(removed))


class NormalizeTagsTests(SimpleTestCase):
    def test_normalizes_loose_values(self):
        self.assertEqual(normalize_tags(None), ())
        self.assertEqual(normalize_tags("BBQ"), ("BBQ",))
        self.assertEqual(normalize_tags(["BBQ", "", None, "Vegan"]), ("BBQ", "Vegan"))
        self.assertEqual(normalize_tags(42), ())
