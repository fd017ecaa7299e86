import unittest

from tests.helpers import NOW, make_sample
from yrboard.conditions import (
    DESCRIPTIONS,
    classify_current,
    classify_forecast,
    classify_measurements,
    describe,
    precipitation,
    summary_symbol,
)
from yrboard.ui.components.icons import DEFAULT_ICON, icon_file, icon_html


class ClassifierTest(unittest.TestCase):
    def test_heavy_snow_below_zero(self):
        sample = make_sample(NOW, temp=-2, next_1h={"details": {"precipitation_amount": 3}})
        self.assertEqual(classify_current(sample), "heavysnow_day")

    def test_clear_sky_without_precipitation(self):
        sample = make_sample(NOW, cloud=10, next_1h={"details": {"precipitation_amount": 0}})
        self.assertEqual(classify_current(sample), "clearsky_day")

    def test_precipitation_thresholds(self):
        self.assertEqual(classify_measurements(2, 4, 0), "rain_day")
        self.assertEqual(classify_measurements(2.1, 4, 0), "heavyrain_day")
        self.assertEqual(classify_measurements(0.4, -1, 0), "snow_day")
        self.assertEqual(classify_measurements(0.4, 0, 0), "rain_day")

    def test_cloud_thresholds(self):
        self.assertEqual(classify_measurements(0, 5, 76), "cloudy")
        self.assertEqual(classify_measurements(0, 5, 75), "partlycloudy_day")
        self.assertEqual(classify_measurements(0, 5, 25), "clearsky_day")
        self.assertEqual(classify_measurements(None, None, None), "clearsky_day")

    def test_summary_codes_take_priority(self):
        sample = make_sample(
            NOW,
            cloud=100,
            next_1h={"summary": {"symbol_code": "fair_night"}, "details": {"precipitation_amount": 5}},
            next_6h={"summary": {"symbol_code": "rain_day"}},
        )
        self.assertEqual(classify_current(sample), "fair_night")
        del sample["data"]["next_1_hours"]
        self.assertEqual(classify_current(sample), "rain_day")

    def test_forecast_uses_six_hour_summary_then_clouds(self):
        sample = make_sample(NOW, cloud=90, next_1h={"summary": {"symbol_code": "snow_day"}})
        self.assertEqual(classify_forecast(sample), "cloudy")
        sample["data"]["next_6_hours"] = {"summary": {"symbol_code": "sleet_day"}}
        self.assertEqual(classify_forecast(sample), "sleet_day")

    def test_accepts_inner_data_block(self):
        sample = make_sample(NOW, cloud=40)
        self.assertEqual(classify_current(sample["data"]), "partlycloudy_day")

    def test_missing_blocks_read_as_zero_precipitation(self):
        self.assertEqual(precipitation({"time": "x"}, "next_1_hours"), 0.0)
        self.assertEqual(precipitation(None, "next_6_hours"), 0.0)

    def test_malformed_blocks_fall_back_to_measurements(self):
        sample = make_sample(NOW, cloud=90, next_1h={"summary": "rain", "details": "n/a"})
        sample["data"]["next_6_hours"] = {"summary": ["snow"]}
        self.assertIsNone(summary_symbol(sample, "next_1_hours"))
        self.assertEqual(precipitation(sample, "next_1_hours"), 0.0)
        self.assertEqual(classify_current(sample), "cloudy")
        self.assertEqual(classify_forecast(sample), "cloudy")


class DescriptionTest(unittest.TestCase):
    def test_table_lookup(self):
        self.assertEqual(describe("heavysnow_day"), "Kraftig snø")
        self.assertEqual(describe("fog"), "Tåke")

    def test_substring_fallback(self):
        self.assertEqual(describe("clearsky_polartwilight"), "Klart")
        self.assertEqual(describe("lightrainshowers_day"), "Regn")
        self.assertEqual(describe("lightsnow"), "Snø")
        self.assertEqual(describe("partlycloudy_polartwilight"), "Overskyet")

    def test_default_for_unknown_codes(self):
        self.assertEqual(describe("thunder"), "Overskyet")
        self.assertEqual(describe(""), "Overskyet")
        self.assertEqual(describe(None), "Overskyet")

    def test_every_classifier_output_has_a_description(self):
        for precip in (0, 1, 3):
            for temp in (-5, 5, None):
                for cloud in (0, 50, 90, None):
                    code = classify_measurements(precip, temp, cloud)
                    self.assertTrue(describe(code))
        for code in DESCRIPTIONS:
            self.assertTrue(describe(code))


def test_icon_lookup_with_default():
    assert icon_file("heavysnow_day") == "snowy-5.svg"
    assert icon_file("clearsky_night") == "night.svg"
    assert icon_file("lightssnowshowersandthunder_day") == DEFAULT_ICON
    assert icon_file(None) == DEFAULT_ICON


def test_icon_html_points_at_icon_file():
    markup = icon_html("rain_day", alt="Regn")
    assert "rainy-3.svg" in markup
    assert 'alt="Regn"' in markup


if __name__ == "__main__":
    unittest.main()
