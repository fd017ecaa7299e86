import os

import requests

from yrboard.errors import ForecastFetchError, ForecastFormatError
from yrboard.forecast import parse_timeseries

MET_API_BASE = os.getenv(
    "MET_API_BASE",
    "https://api.met.no/weatherapi/locationforecast/2.0/compact",
)
MET_TIMEOUT_SECONDS = float(os.getenv("MET_TIMEOUT_SECONDS", "10"))


def _user_agent() -> str:
    # api.met.no rejects requests without an identifying User-Agent.
    return os.getenv("MET_USER_AGENT", "NorwegianWeatherApp/1.0 contact@zetadisplay.com")


def fetch_locationforecast(lat: float, lon: float, session: requests.Session | None = None) -> dict:
    """
    GET the compact Locationforecast document for a coordinate.

    Raises ForecastFetchError on transport errors or a non-success status and
    ForecastFormatError when the body is not JSON.
    """
    http = session or requests
    headers = {"User-Agent": _user_agent(), "Accept": "application/json"}
    try:
        resp = http.get(
            MET_API_BASE,
            params={"lat": lat, "lon": lon},
            headers=headers,
            timeout=MET_TIMEOUT_SECONDS,
        )
        resp.raise_for_status()
    except requests.HTTPError as exc:
        status = getattr(exc.response, "status_code", "?")
        raise ForecastFetchError(f"HTTP error! status: {status}") from exc
    except requests.RequestException as exc:
        raise ForecastFetchError(f"Request failed: {exc}") from exc
    try:
        return resp.json()
    except ValueError as exc:
        raise ForecastFormatError("Malformed JSON in forecast response") from exc


def fetch_city_timeseries(city: dict, session: requests.Session | None = None) -> list[dict]:
    payload = fetch_locationforecast(city["lat"], city["lon"], session=session)
    return parse_timeseries(payload)
