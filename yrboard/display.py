import math
from datetime import datetime

from yrboard.conditions import (
    classify_current,
    classify_forecast,
    describe,
    instant_details,
    precipitation,
)
from yrboard.forecast import DAY_NAMES

MONTH_NAMES = [
    "januar", "februar", "mars", "april", "mai", "juni",
    "juli", "august", "september", "oktober", "november", "desember",
]
# Forecast lows are not in the compact feed; shown as a fixed offset below the high.
FORECAST_LOW_OFFSET = 3

ERROR_REGIONS = {
    "current_temp": "--°",
    "current_description": "Feil ved lasting",
    "rain_amount": "--mm",
    "wind_speed": "-- m/s",
    "current_symbol": None,
}


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def fmt_temp(value: float | None) -> str:
    if value is None:
        return "--°"
    return f"{round_half_up(value)}°"


def fmt_precip(value: float | None) -> str:
    return f"{(value or 0):g}mm"


def fmt_wind(value: float | None) -> str:
    if value is None:
        return "-- m/s"
    return f"{round_half_up(value)} m/s"


def format_clock(now: datetime) -> str:
    return now.strftime("%H:%M")


def format_long_date(now: datetime) -> str:
    return f"{DAY_NAMES[now.weekday()]} {now.day}. {MONTH_NAMES[now.month - 1]}"


def current_regions(sample: dict | None) -> dict:
    if not sample:
        return dict(ERROR_REGIONS)
    details = instant_details(sample)
    symbol = classify_current(sample)
    return {
        "current_temp": fmt_temp(details.get("air_temperature")),
        "current_description": describe(symbol),
        "rain_amount": fmt_precip(precipitation(sample, "next_1_hours")),
        "wind_speed": fmt_wind(details.get("wind_speed")),
        "current_symbol": symbol,
    }


def forecast_regions(entry: dict) -> dict:
    sample = entry.get("sample")
    details = instant_details(sample)
    temp = details.get("air_temperature")
    symbol = classify_forecast(sample)
    high = round_half_up(temp) if temp is not None else None
    return {
        "day_name": entry.get("day_name") or "",
        "high": fmt_temp(high),
        "low": fmt_temp(high - FORECAST_LOW_OFFSET if high is not None else None),
        "description": describe(symbol),
        "rain": fmt_precip(precipitation(sample, "next_6_hours")),
        "wind": fmt_wind(details.get("wind_speed")),
        "symbol": symbol,
    }


def build_view(selection: dict | None) -> dict:
    """Text for every display region, or the error placeholders without a selection."""
    if not selection:
        return {"current": dict(ERROR_REGIONS), "forecast": []}
    return {
        "current": current_regions(selection.get("current")),
        "forecast": [forecast_regions(entry) for entry in selection.get("forecast") or []],
    }
