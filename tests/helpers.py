from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

OSLO = "Europe/Oslo"
# Tuesday, summer time (UTC+2).
NOW = datetime(2024, 5, 14, 10, 0, tzinfo=ZoneInfo(OSLO))


def iso_utc(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


def make_sample(moment: datetime, temp=5.0, wind=3.2, cloud=50.0, next_1h=None, next_6h=None) -> dict:
    data = {
        "instant": {
            "details": {
                "air_temperature": temp,
                "wind_speed": wind,
                "cloud_area_fraction": cloud,
            }
        }
    }
    if next_1h is not None:
        data["next_1_hours"] = next_1h
    if next_6h is not None:
        data["next_6_hours"] = next_6h
    return {"time": iso_utc(moment), "data": data}


def series_at(offsets_hours, base: datetime = NOW) -> list[dict]:
    return [make_sample(base + timedelta(hours=h), temp=float(i)) for i, h in enumerate(offsets_hours)]


def payload_for(timeseries: list[dict]) -> dict:
    return {
        "type": "Feature",
        "geometry": {"type": "Point", "coordinates": [10.7522, 59.9139, 12]},
        "properties": {"meta": {"updated_at": iso_utc(NOW)}, "timeseries": timeseries},
    }
