import unittest

import plotly.graph_objects as go

from src.core.validator import InvalidInput
from src.models.simulation import SimulationStep, series_from_values
from src.visualization import DARK_THEME, LIGHT_THEME, LabelStyle, build_split_area_chart
from src.core.extrema import LabelDecision, LabelPosition


class SplitAreaChartTests(unittest.TestCase):
    def setUp(self) -> None:
        self.series = series_from_values([100, 120, 90, 150, 150, 140])

    def test_returns_figure_with_domain_range(self) -> None:
        figure = build_split_area_chart(self.series, 100)
        self.assertIsInstance(figure, go.Figure)
        low, high = figure.layout.yaxis.range
        self.assertAlmostEqual(low, 87.0)
        self.assertAlmostEqual(high, 153.0)

    def test_fill_gradient_splits_at_reference(self) -> None:
        figure = build_split_area_chart(self.series, 100)
        area = next(trace for trace in figure.data if trace.name == "Bankroll")
        self.assertEqual(area.fill, "tonexty")
        stops = [tuple(stop) for stop in area.fillgradient.colorscale]
        self.assertEqual(len(stops), 4)
        self.assertAlmostEqual(stops[1][0], 53 / 66)
        self.assertEqual(stops[1][0], stops[2][0])

    def test_one_annotation_per_label_plus_start_line(self) -> None:
        figure = build_split_area_chart(self.series, 100)
        texts = [annotation.text for annotation in figure.layout.annotations]
        self.assertIn("<b>START</b>", texts)
        value_labels = [text for text in texts if text != "<b>START</b>"]
        self.assertEqual(len(value_labels), 6)
        self.assertIn("<b>$150</b>", value_labels)

    def test_label_offsets_follow_style(self) -> None:
        style = LabelStyle(above_offset=30, below_offset=-40)
        figure = build_split_area_chart(series_from_values([1, 5, 2]), 0, label_style=style)
        shifts = {
            annotation.x: annotation.yshift
            for annotation in figure.layout.annotations
            if annotation.text != "<b>START</b>"
        }
        self.assertEqual(shifts, {0: -40, 1: 30, 2: -40})

    def test_max_steps_extends_x_axis(self) -> None:
        figure = build_split_area_chart(self.series, 100, max_steps=20)
        self.assertEqual(list(figure.layout.xaxis.range), [0, 20])
        figure = build_split_area_chart(self.series, 100)
        self.assertEqual(list(figure.layout.xaxis.range), [0, 5])

    def test_stroke_split_into_profit_and_loss(self) -> None:
        figure = build_split_area_chart(self.series, 100, theme=LIGHT_THEME)
        names = {trace.name for trace in figure.data}
        self.assertTrue({"Profit", "Loss"}.issubset(names))
        profit = next(trace for trace in figure.data if trace.name == "Profit")
        self.assertEqual(profit.line.color, LIGHT_THEME["palette"]["profit"])

    def test_hover_rows_include_outcome(self) -> None:
        series = [
            SimulationStep(index=0, value=100, net=0),
            SimulationStep(
                index=1, value=135, net=35, outcome={"number": 17, "color": "black"}
            ),
        ]
        figure = build_split_area_chart(series, 100, theme=DARK_THEME)
        area = next(trace for trace in figure.data if trace.name == "Bankroll")
        self.assertEqual(list(area.customdata[1]), ["17 (black)", "$135", "+35"])
        self.assertEqual(list(area.customdata[0]), ["n/a", "$100", "+0"])

    def test_rejects_invalid_series(self) -> None:
        with self.assertRaises(InvalidInput):
            build_split_area_chart([], 100)
        with self.assertRaises(InvalidInput):
            build_split_area_chart([SimulationStep(index=3, value=1)], 100)


class ThemePaletteTests(unittest.TestCase):
    def test_palettes_carry_only_rendered_keys(self) -> None:
        expected = {
            "profit",
            "loss",
            "profit_label",
            "loss_label",
            "reference",
            "axis_tick",
            "grid",
            "hover_background",
        }
        for theme in (DARK_THEME, LIGHT_THEME):
            with self.subTest(theme=theme["name"]):
                self.assertEqual(set(theme["palette"]), expected)
                self.assertEqual(set(theme), {"name", "palette", "plotly_template"})


class LabelStyleTests(unittest.TestCase):
    def test_colour_and_offset_mapping(self) -> None:
        style = LabelStyle.from_theme(DARK_THEME)
        peak = LabelDecision(
            index=0, value=10, show=True, position=LabelPosition.PEAK, is_above_reference=True
        )
        last = LabelDecision(
            index=1, value=5, show=True, position=LabelPosition.LAST, is_above_reference=False
        )
        self.assertEqual(style.color_for(peak), DARK_THEME["palette"]["profit_label"])
        self.assertEqual(style.color_for(last), DARK_THEME["palette"]["loss_label"])
        self.assertEqual(style.offset_for(peak), 15)
        self.assertEqual(style.offset_for(last), -20)

    def test_from_theme_overrides(self) -> None:
        style = LabelStyle.from_theme(LIGHT_THEME, above_offset=8)
        self.assertEqual(style.above_offset, 8)
        self.assertEqual(style.profit_color, LIGHT_THEME["palette"]["profit_label"])


if __name__ == "__main__":
    unittest.main()
