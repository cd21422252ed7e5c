import unittest

from tote.demo import SAMPLE_ACTUAL_RESULT, SAMPLE_PREDICTIONS
from tote.score import ParseError
from tote.scoring import calculate_points


class TestCalculatePoints(unittest.TestCase):
    def test_sample_round(self):
        points = calculate_points(SAMPLE_PREDICTIONS, SAMPLE_ACTUAL_RESULT)
        self.assertEqual(points, {"user1": 0, "user2": 0, "user3": 1, "user4": 2})

    def test_same_users(self):
        predictions = {"a": "1:1", "b": "0:3", "c": "2:2"}
        points = calculate_points(predictions, "2:2")
        self.assertEqual(set(points), set(predictions))
        self.assertEqual(points, {"a": 1, "b": 0, "c": 2})

    def test_deterministic(self):
        first = calculate_points(SAMPLE_PREDICTIONS, SAMPLE_ACTUAL_RESULT)
        second = calculate_points(SAMPLE_PREDICTIONS, SAMPLE_ACTUAL_RESULT)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_input_not_mutated(self):
        predictions = dict(SAMPLE_PREDICTIONS)
        calculate_points(predictions, SAMPLE_ACTUAL_RESULT)
        self.assertEqual(predictions, SAMPLE_PREDICTIONS)

    def test_empty_predictions(self):
        self.assertEqual(calculate_points({}, "1:0"), {})

    def test_bad_guess_names_user(self):
        predictions = {"user1": "1:0", "user2": "1-0"}
        with self.assertRaises(ParseError) as ctx:
            calculate_points(predictions, "1:0")
        self.assertEqual(ctx.exception.user, "user2")
        self.assertEqual(ctx.exception.raw, "1-0")

    def test_huge_guess_names_user(self):
        raw = "1" * 5000 + ":0"
        with self.assertRaises(ParseError) as ctx:
            calculate_points({"u": raw}, "1:0")
        self.assertEqual(ctx.exception.user, "u")
        self.assertEqual(ctx.exception.raw, raw)

    def test_bad_actual_result(self):
        with self.assertRaises(ParseError) as ctx:
            calculate_points({"user1": "1:0"}, "one:nil")
        self.assertIsNone(ctx.exception.user)


if __name__ == "__main__":
    unittest.main()
