import os
import threading
from datetime import datetime
from zoneinfo import ZoneInfo

from yrboard.cities import get_city
from yrboard.errors import WeatherError
from yrboard.forecast import FORECAST_DAYS, LOCAL_TZ, select
from yrboard.logs import log
from yrboard.met_client import fetch_city_timeseries

DEFAULT_CITY = os.getenv("DEFAULT_CITY", "oslo")
FORECAST_REFRESH_SECONDS = int(os.getenv("FORECAST_REFRESH_SECONDS", "600"))


class WeatherController:
    """
    Owns the active city and the dataset shown for it.

    The dataset is replaced wholesale on each successful refresh; a failed
    refresh keeps whatever was there before.
    """

    def __init__(
        self,
        city_key: str = DEFAULT_CITY,
        fetcher=fetch_city_timeseries,
        clock=None,
        tz_name: str = LOCAL_TZ,
        days_ahead: int = FORECAST_DAYS,
        refresh_seconds: int = FORECAST_REFRESH_SECONDS,
    ):
        get_city(city_key)
        self.city_key = city_key
        self.tz_name = tz_name
        self.days_ahead = days_ahead
        self.refresh_seconds = refresh_seconds
        self.timeseries: list[dict] = []
        self.selection: dict | None = None
        self.status: str | None = None
        self.updated_at: datetime | None = None
        self.last_attempt: datetime | None = None
        self._fetcher = fetcher
        self._clock = clock or (lambda: datetime.now(ZoneInfo(tz_name)))
        self._refresh_lock = threading.Lock()

    @property
    def city(self) -> dict:
        return get_city(self.city_key)

    def now(self) -> datetime:
        return self._clock()

    def is_due(self, now: datetime | None = None) -> bool:
        if self.last_attempt is None:
            return True
        now = now or self.now()
        return (now - self.last_attempt).total_seconds() >= self.refresh_seconds

    def refresh(self) -> bool:
        """
        Fetch and reselect for the active city.

        Returns False without fetching when another refresh is still running.
        Fetch and selection errors are recorded in `status` and re-raised.
        """
        if not self._refresh_lock.acquire(blocking=False):
            log("Refresh skipped: previous fetch still in flight")
            return False
        try:
            city_key = self.city_key
            city = get_city(city_key)
            now = self.now()
            self.last_attempt = now
            log(f"Fetching weather data for {city['name']} from api.met.no")
            try:
                timeseries = self._fetcher(city)
                selection = select(timeseries, now, self.days_ahead, self.tz_name)
            except WeatherError as exc:
                self.status = f"Feil: {exc}"
                log(f"Failed to load weather data for {city['name']}: {repr(exc)}")
                raise
            if city_key != self.city_key:
                log(f"Discarding data for {city['name']}: city changed during fetch")
                return False
            self.timeseries = timeseries
            self.selection = selection
            self.updated_at = now
            self.status = "OK"
            log(
                f"Loaded {len(timeseries)} samples for {city['name']}; "
                f"current index {selection['current_index']}, "
                f"{len(selection['forecast'])} forecast days"
            )
            return True
        finally:
            self._refresh_lock.release()

    def switch_city(self, city_key: str) -> bool:
        """
        Make `city_key` active and load its forecast.

        Unknown keys raise UnknownCity before anything changes.
        """
        city = get_city(city_key)
        log(f"Switching to city: {city['name']}")
        self.city_key = city_key
        self.timeseries = []
        self.selection = None
        self.updated_at = None
        self.last_attempt = None
        self.status = None
        return self.refresh()


class RefreshScheduler:
    """Calls controller.refresh() every interval on a background thread until stopped."""

    def __init__(self, controller: WeatherController, interval_seconds: float | None = None, on_refresh=None):
        self.controller = controller
        self.interval_seconds = interval_seconds if interval_seconds is not None else controller.refresh_seconds
        self.on_refresh = on_refresh
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        # One event per run: a loop still inside a slow fetch stays stopped.
        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="forecast-refresh",
            daemon=True,
        )
        self._thread.start()

    def stop(self, timeout: float | None = 5) -> None:
        if self._stop_event is not None:
            self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.is_set():
            try:
                if self.controller.refresh() and self.on_refresh is not None:
                    self.on_refresh(self.controller)
            except Exception as e:
                log(f"Scheduled refresh failed: {repr(e)}")
            if stop_event.wait(self.interval_seconds):
                break
