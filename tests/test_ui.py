import re

from tests.helpers import NOW, OSLO, series_at
from yrboard.cities import CITIES
from yrboard.controller import WeatherController
from yrboard.forecast_worker import summarize
from yrboard.ui.components.cards import current_card_html, forecast_card_html
from yrboard.ui.shell import header_html
from yrboard.ui.tokens import COLORS, css_variables

HEX_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


def _hex_luminance(value: str) -> float:
    value = value.lstrip("#")
    r = int(value[0:2], 16) / 255.0
    g = int(value[2:4], 16) / 255.0
    b = int(value[4:6], 16) / 255.0
    return 0.2126 * r + 0.7152 * g + 0.0722 * b


def test_token_colors_are_hex():
    for key, value in COLORS.items():
        assert HEX_RE.match(value), f"Color {key} is not a hex color"
    assert "--color-accent: #6ab6ff;" in css_variables()


def test_dark_theme_contrast_guardrails():
    assert _hex_luminance(COLORS["bg"]) <= 0.25, "background too light"
    assert _hex_luminance(COLORS["surface"]) <= 0.25, "surface too light"
    assert _hex_luminance(COLORS["text"]) >= 0.7, "text too dark"


def test_current_card_fills_named_regions():
    markup = current_card_html(
        {
            "current_temp": "5°",
            "current_description": "Regn",
            "rain_amount": "0.7mm",
            "wind_speed": "4 m/s",
            "current_symbol": "rain_day",
        }
    )
    for region in ("currentTemp", "currentDescription", "rainAmount", "windSpeed", "currentWeatherIcon"):
        assert f'id="{region}"' in markup
    assert "rainy-3.svg" in markup
    assert "0.7mm" in markup


def test_forecast_card_is_numbered():
    markup = forecast_card_html(
        {"day_name": "Onsdag", "high": "11°", "low": "8°", "description": "Klart", "rain": "0mm", "wind": "6 m/s", "symbol": "clearsky_day"},
        2,
    )
    for region in ("day-name2", "forecastHigh2", "forecastLow2", "forecastDesc2", "forecastRain2", "forecastWind2", "forecastIcon2"):
        assert f'id="{region}"' in markup
    assert "Onsdag" in markup


def test_header_escapes_city_text():
    markup = header_html({"name": "Ålesund", "address": "A & B"}, "10:00", "Tirsdag 14. mai")
    assert "Ålesund" in markup
    assert "A &amp; B" in markup
    assert "Tirsdag 14. mai" in markup


def test_worker_summary_lists_current_and_forecast():
    controller = WeatherController(
        "drammen",
        fetcher=lambda city: series_at([-2, -1, 0, 3, 27, 51]),
        clock=lambda: NOW,
        tz_name=OSLO,
    )
    controller.refresh()
    line = summarize(controller)
    assert line.startswith(f"{CITIES['drammen']['name']}: 2°")
    assert "Onsdag 4°/1°" in line
    assert "Torsdag 5°/2°" in line
