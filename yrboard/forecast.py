import os
from datetime import date, datetime, time, timedelta

import pandas as pd

from yrboard.errors import EmptyTimeseries, ForecastFormatError

LOCAL_TZ = os.getenv("LOCAL_TZ", "Europe/Oslo")
FORECAST_DAYS = 2
# Rough sample density used when a day has no matching sample at all.
SAMPLES_PER_DAY_FALLBACK = 12

# Monday first, matching datetime.weekday().
DAY_NAMES = ["Mandag", "Tirsdag", "Onsdag", "Torsdag", "Fredag", "Lørdag", "Søndag"]


def parse_timeseries(payload: dict | None) -> list[dict]:
    """
    Pull the timeseries list out of a Locationforecast payload.

    Raises ForecastFormatError when the document does not look like one.
    """
    if not isinstance(payload, dict):
        raise ForecastFormatError("Invalid weather data format")
    props = payload.get("properties")
    if not isinstance(props, dict):
        raise ForecastFormatError("Invalid weather data format")
    timeseries = props.get("timeseries")
    if not isinstance(timeseries, list):
        raise ForecastFormatError("Invalid weather data format")
    for sample in timeseries:
        if not isinstance(sample, dict) or not sample.get("time"):
            raise ForecastFormatError("Timeseries entry without a timestamp")
    return timeseries


def timeseries_frame(timeseries: list[dict], tz_name: str = LOCAL_TZ) -> pd.DataFrame:
    """
    One row per sample, indexed by position, with a tz-aware local "time" column.
    """
    try:
        times = pd.to_datetime([sample["time"] for sample in timeseries], utc=True)
    except (KeyError, TypeError, ValueError) as exc:
        raise ForecastFormatError(f"Unreadable sample timestamp: {exc}") from exc
    frame = pd.DataFrame({"time": times})
    if not frame.empty:
        frame["time"] = frame["time"].dt.tz_convert(tz_name)
    return frame


def to_local(value, tz_name: str = LOCAL_TZ) -> pd.Timestamp:
    ts = pd.Timestamp(value)
    if ts.tzinfo is None:
        return ts.tz_localize(tz_name)
    return ts.tz_convert(tz_name)


def local_noon(target_date: date, tz_name: str = LOCAL_TZ) -> pd.Timestamp:
    return pd.Timestamp(datetime.combine(target_date, time(12, 0))).tz_localize(tz_name)


def select_current(timeseries: list[dict], now, tz_name: str = LOCAL_TZ) -> int:
    """
    Index of the sample closest to `now`. Ties go to the earlier sample.
    """
    if not timeseries:
        raise EmptyTimeseries("No samples available")
    frame = timeseries_frame(timeseries, tz_name)
    diffs = (frame["time"] - to_local(now, tz_name)).abs()
    return int(diffs.idxmin())


def _closest_to_noon(frame: pd.DataFrame, start_index: int, target_date: date, tz_name: str) -> int | None:
    target_date = pd.Timestamp(target_date).date()
    window = frame.iloc[max(start_index, 0):]
    window = window[window["time"].dt.date == target_date]
    if window.empty:
        return None
    diffs = (window["time"] - local_noon(target_date, tz_name)).abs()
    return int(diffs.idxmin())


def select_daily_forecast(
    timeseries: list[dict],
    start_index: int,
    target_date: date,
    tz_name: str = LOCAL_TZ,
) -> int | None:
    """
    Index of the sample on `target_date` closest to local noon, scanning from
    `start_index` onwards. None when no sample falls on that date.
    """
    if not timeseries:
        return None
    frame = timeseries_frame(timeseries, tz_name)
    return _closest_to_noon(frame, start_index, target_date, tz_name)


def build_forecast(
    timeseries: list[dict],
    current_index: int,
    now,
    days_ahead: int = FORECAST_DAYS,
    tz_name: str = LOCAL_TZ,
) -> list[dict]:
    """
    Pick one sample per upcoming day after the current sample.

    Days without any sample on their date fall back to a fixed offset of
    SAMPLES_PER_DAY_FALLBACK samples per day; days that cannot be filled
    either way are left out, so fewer than `days_ahead` entries may come back.
    """
    if not timeseries:
        return []
    frame = timeseries_frame(timeseries, tz_name)
    today = to_local(now, tz_name).date()
    start = current_index + 1

    entries = []
    for offset in range(1, days_ahead + 1):
        target_date = today + timedelta(days=offset)
        best_index = _closest_to_noon(frame, start, target_date, tz_name)
        if best_index is None:
            fallback_index = start + offset * SAMPLES_PER_DAY_FALLBACK
            if fallback_index < len(timeseries):
                best_index = fallback_index
        if best_index is None:
            continue
        sample_time = frame.at[best_index, "time"]
        entries.append(
            {
                "index": best_index,
                "sample": timeseries[best_index],
                "target_date": target_date,
                "date": sample_time.date(),
                "day_name": DAY_NAMES[sample_time.weekday()],
            }
        )
    entries.sort(key=lambda entry: entry["index"])
    return entries


def select(
    timeseries: list[dict],
    now,
    days_ahead: int = FORECAST_DAYS,
    tz_name: str = LOCAL_TZ,
) -> dict:
    current_index = select_current(timeseries, now, tz_name)
    return {
        "current_index": current_index,
        "current": timeseries[current_index],
        "forecast": build_forecast(timeseries, current_index, now, days_ahead, tz_name),
    }
