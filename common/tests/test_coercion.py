from django.test import SimpleTestCase

from common.coercion import TRAVEL_DISTANCE_MAX, coerce_flag, normalize_travel_distance
from common.serialization import dump_list, load_list


class CoerceFlagTests(SimpleTestCase):
    def test_true_inputs(self):
        for value in [True, 1, "1", "true", "TRUE", " True "]:
            with self.subTest(value=value):
                self.assertIs(coerce_flag(value), True)

    def test_false_inputs(self):
        for value in [False, 0, "0", "false", "False", "", None]:
            with self.subTest(value=value):
                self.assertIs(coerce_flag(value), False)

    def test_rejected_inputs(self):
        for value in [2, -1, "yes", "on", "maybe", 1.0, [], {}]:
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    coerce_flag(value)


class TravelDistanceTests(SimpleTestCase):
    def test_integers_and_numeric_text(self):
        self.assertEqual(normalize_travel_distance(30), 30)
        self.assertEqual(normalize_travel_distance("30"), 30)
        self.assertEqual(normalize_travel_distance(" 12 km"), 12)
        self.assertEqual(normalize_travel_distance("7.9"), 7)
        self.assertEqual(normalize_travel_distance(7.9), 7)

    def test_unparseable_values_default_to_zero(self):
        for value in [None, "", "far", "km 10", True, float("nan")]:
            with self.subTest(value=value):
                self.assertEqual(normalize_travel_distance(value), 0)

    def test_negative_values_are_clamped(self):
        self.assertEqual(normalize_travel_distance(-5), 0)
        self.assertEqual(normalize_travel_distance("-20"), 0)

    def test_out_of_range_values_are_clamped_to_column_max(self):
        self.assertEqual(normalize_travel_distance("9" * 30), TRAVEL_DISTANCE_MAX)
        self.assertEqual(normalize_travel_distance("9" * 5000), TRAVEL_DISTANCE_MAX)
        self.assertEqual(normalize_travel_distance(10**40), TRAVEL_DISTANCE_MAX)
        self.assertEqual(normalize_travel_distance(1e30), TRAVEL_DISTANCE_MAX)
        self.assertEqual(normalize_travel_distance("-" + "9" * 5000), 0)
        self.assertEqual(normalize_travel_distance(float("inf")), 0)

    def test_leading_zeros_do_not_count_towards_length(self):
        self.assertEqual(normalize_travel_distance("0" * 40 + "12"), 12)


class ListSerializationTests(SimpleTestCase):
    def test_order_and_duplicates_survive(self):
        values = ["b.jpg", "a.jpg", "b.jpg"]
        self.assertEqual(load_list(dump_list(values)), values)

    def test_empty_text_is_empty_list(self):
        self.assertEqual(load_list(None), [])
        self.assertEqual(load_list(""), [])
        self.assertEqual(dump_list(None), "[]")

    def test_non_array_or_broken_text_raises(self):
        with self.assertRaises(ValueError):
            load_list('{"a": 1}')
        with self.assertRaises(ValueError):
            load_list("[broken")
