import html
import os

ICON_BASE_URL = os.getenv("ICON_BASE_URL", "app/static/weather_icons/animated")

ICON_FILES = {
    "clearsky_day": "day.svg",
    "clearsky_night": "night.svg",
    "fair_day": "cloudy-day-1.svg",
    "fair_night": "cloudy-night-1.svg",
    "partlycloudy_day": "cloudy-day-2.svg",
    "partlycloudy_night": "cloudy-night-2.svg",
    "cloudy": "cloudy.svg",
    "rain_day": "rainy-3.svg",
    "rain_night": "rainy-3.svg",
    "heavyrain_day": "rainy-5.svg",
    "heavyrain_night": "rainy-5.svg",
    "heavyrain": "rainy-5.svg",
    "rainshowers_day": "rainy-2.svg",
    "rainshowers_night": "rainy-2.svg",
    "snow_day": "snowy-3.svg",
    "snow_night": "snowy-3.svg",
    "heavysnow_day": "snowy-5.svg",
    "heavysnow_night": "snowy-5.svg",
    "thunderstorm_day": "thunder.svg",
    "thunderstorm_night": "thunder.svg",
    "windy_day": "cloudy.svg",
    "windy_night": "cloudy.svg",
    "sleet_day": "snowy-2.svg",
    "sleet_night": "snowy-2.svg",
    "fog": "cloudy.svg",
}
DEFAULT_ICON = "cloudy.svg"


def icon_file(symbol_code: str | None) -> str:
    return ICON_FILES.get(symbol_code or "", DEFAULT_ICON)


def icon_html(symbol_code: str | None, alt: str = "") -> str:
    src = f"{ICON_BASE_URL.rstrip('/')}/{icon_file(symbol_code)}"
    return f"<img class=\"weather-icon\" src=\"{html.escape(src)}\" alt=\"{html.escape(alt)}\" />"
