import unittest

from src.core.extrema import LabelPosition, label_all, label_for, shown_labels
from src.core.validator import InvalidInput
from src.models.simulation import series_from_values


class LabelForTests(unittest.TestCase):
    def test_endpoints_and_trough(self) -> None:
        series = series_from_values([5, 3, 8])
        first = label_for(series, 0, 5)
        self.assertTrue(first.show)
        self.assertTrue(first.is_peak)
        self.assertFalse(first.is_trough)
        self.assertTrue(first.is_above_reference)

        middle = label_for(series, 1, 5)
        self.assertTrue(middle.show)
        self.assertEqual(middle.position, LabelPosition.TROUGH)
        self.assertFalse(middle.is_above_reference)

        last = label_for(series, 2, 5)
        self.assertTrue(last.show)
        self.assertTrue(last.is_peak)
        self.assertTrue(last.is_last)
        self.assertEqual(last.position, LabelPosition.PEAK)

    def test_middle_non_extremum_suppressed(self) -> None:
        decision = label_for(series_from_values([1, 5, 10]), 1, 0)
        self.assertFalse(decision.show)
        self.assertIsNone(decision.position)
        self.assertEqual(decision.value, 5)

    def test_flat_run_prefers_peak(self) -> None:
        series = series_from_values([4, 4, 4])
        for index in range(3):
            with self.subTest(index=index):
                decision = label_for(series, index, 4)
                self.assertTrue(decision.show)
                self.assertTrue(decision.is_peak)
                self.assertTrue(decision.is_trough)
                self.assertEqual(decision.position, LabelPosition.PEAK)
                self.assertTrue(decision.renders_above)
                self.assertTrue(decision.is_above_reference)

    def test_single_point_series(self) -> None:
        decision = label_for(series_from_values([10]), 0, 20)
        self.assertTrue(decision.show)
        self.assertTrue(decision.is_peak and decision.is_trough and decision.is_last)
        self.assertEqual(decision.position, LabelPosition.PEAK)
        self.assertFalse(decision.is_above_reference)

    def test_last_point_on_falling_series_is_trough(self) -> None:
        decision = label_for(series_from_values([10, 9, 8]), 2, 5)
        self.assertEqual(decision.position, LabelPosition.TROUGH)
        self.assertFalse(decision.renders_above)

    def test_last_point_renders_below_when_rising(self) -> None:
        # The last point of a rising run is a peak; the first point a trough.
        series = series_from_values([1, 2, 3])
        self.assertEqual(label_for(series, 0, 0).position, LabelPosition.TROUGH)
        self.assertEqual(label_for(series, 2, 0).position, LabelPosition.PEAK)

    def test_reference_tie_counts_as_above(self) -> None:
        decision = label_for(series_from_values([5, 3]), 0, 5)
        self.assertTrue(decision.is_above_reference)

    def test_out_of_range_index(self) -> None:
        series = series_from_values([1, 2])
        with self.assertRaises(InvalidInput):
            label_for(series, 2, 0)
        with self.assertRaises(InvalidInput):
            label_for(series, -1, 0)


class LabelAllTests(unittest.TestCase):
    def test_end_to_end_example(self) -> None:
        series = series_from_values([100, 120, 90, 150, 150, 140])
        decisions = label_all(series, 100)
        self.assertEqual([d.show for d in decisions], [True] * 6)
        self.assertEqual(
            [d.position for d in decisions],
            [
                LabelPosition.TROUGH,
                LabelPosition.PEAK,
                LabelPosition.TROUGH,
                LabelPosition.PEAK,
                LabelPosition.PEAK,
                LabelPosition.TROUGH,
            ],
        )
        self.assertEqual(
            [d.is_above_reference for d in decisions],
            [True, True, False, True, True, True],
        )
        self.assertTrue(decisions[4].is_peak)
        self.assertFalse(decisions[4].is_last)
        self.assertTrue(decisions[5].is_last)

    def test_matches_per_index_decisions(self) -> None:
        cases = [
            [100, 120, 90, 150, 150, 140],
            [1, 5, 10],
            [4, 4, 4],
            [7],
            [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5],
        ]
        for values in cases:
            with self.subTest(values=values):
                series = series_from_values(values)
                eager = label_all(series, 4)
                lazy = [label_for(series, i, 4) for i in range(len(series))]
                self.assertEqual(eager, lazy)

    def test_empty_series(self) -> None:
        self.assertEqual(label_all([], 0), [])

    def test_shown_labels_filters_hidden(self) -> None:
        shown = shown_labels(series_from_values([1, 5, 10]), 0)
        self.assertEqual([d.index for d in shown], [0, 2])


if __name__ == "__main__":
    unittest.main()
