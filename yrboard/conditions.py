HEAVY_PRECIP_MM = 2
OVERCAST_CLOUD_PCT = 75
PARTLY_CLOUD_PCT = 25

DESCRIPTIONS = {
    "clearsky_day": "Klart",
    "clearsky_night": "Klart",
    "fair_day": "Delvis skyet",
    "fair_night": "Delvis skyet",
    "partlycloudy_day": "Delvis skyet",
    "partlycloudy_night": "Delvis skyet",
    "cloudy": "Overskyet",
    "rainshowers_day": "Regnbyger",
    "rainshowers_night": "Regnbyger",
    "rain_day": "Regn",
    "rain_night": "Regn",
    "heavyrain_day": "Kraftig regn",
    "heavyrain_night": "Kraftig regn",
    "heavyrain": "Kraftig regn",
    "snow_day": "Snø",
    "snow_night": "Snø",
    "heavysnow_day": "Kraftig snø",
    "heavysnow_night": "Kraftig snø",
    "sleet_day": "Sludd",
    "sleet_night": "Sludd",
    "fog": "Tåke",
}
# Checked in order when a code is not in DESCRIPTIONS.
DESCRIPTION_FALLBACKS = [
    ("clear", "Klart"),
    ("cloud", "Overskyet"),
    ("rain", "Regn"),
    ("snow", "Snø"),
    ("fog", "Tåke"),
]
DEFAULT_DESCRIPTION = "Overskyet"


def _data(sample: dict | None) -> dict:
    # Accept both a timeseries entry and its inner "data" block.
    if not isinstance(sample, dict):
        return {}
    inner = sample.get("data")
    return inner if isinstance(inner, dict) else sample


def _block(sample: dict | None, name: str) -> dict:
    block = _data(sample).get(name)
    return block if isinstance(block, dict) else {}


def instant_details(sample: dict | None) -> dict:
    details = _block(sample, "instant").get("details")
    return details if isinstance(details, dict) else {}


def summary_symbol(sample: dict | None, period: str) -> str | None:
    summary = _block(sample, period).get("summary")
    if not isinstance(summary, dict):
        return None
    return summary.get("symbol_code") or None


def precipitation(sample: dict | None, period: str) -> float:
    details = _block(sample, period).get("details")
    if not isinstance(details, dict):
        return 0.0
    value = details.get("precipitation_amount")
    return float(value) if value is not None else 0.0


def classify_clouds(cloud_cover: float | None) -> str:
    cover = cloud_cover or 0
    if cover > OVERCAST_CLOUD_PCT:
        return "cloudy"
    if cover > PARTLY_CLOUD_PCT:
        return "partlycloudy_day"
    return "clearsky_day"


def classify_measurements(
    precipitation_mm: float | None,
    air_temperature: float | None,
    cloud_cover: float | None,
) -> str:
    amount = precipitation_mm or 0
    if amount > 0:
        heavy = amount > HEAVY_PRECIP_MM
        if air_temperature is not None and air_temperature < 0:
            return "heavysnow_day" if heavy else "snow_day"
        return "heavyrain_day" if heavy else "rain_day"
    return classify_clouds(cloud_cover)


def classify_current(sample: dict | None) -> str:
    """
    Symbol code for the current conditions.

    Uses the published 1-hour or 6-hour summary code when there is one and
    otherwise derives a code from precipitation, temperature and cloud cover.
    """
    code = summary_symbol(sample, "next_1_hours") or summary_symbol(sample, "next_6_hours")
    if code:
        return code
    details = instant_details(sample)
    return classify_measurements(
        precipitation(sample, "next_1_hours"),
        details.get("air_temperature"),
        details.get("cloud_area_fraction"),
    )


def classify_forecast(sample: dict | None) -> str:
    """Symbol code for a forecast day panel (6-hour summary, else cloud cover)."""
    code = summary_symbol(sample, "next_6_hours")
    if code:
        return code
    return classify_clouds(instant_details(sample).get("cloud_area_fraction"))


def describe(symbol_code: str | None) -> str:
    code = symbol_code or ""
    if code in DESCRIPTIONS:
        return DESCRIPTIONS[code]
    for needle, text in DESCRIPTION_FALLBACKS:
        if needle in code:
            return text
    return DEFAULT_DESCRIPTION
