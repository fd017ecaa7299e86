import argparse
import sys
import time

from yrboard.cities import CITIES
from yrboard.controller import DEFAULT_CITY, FORECAST_REFRESH_SECONDS, RefreshScheduler, WeatherController
from yrboard.display import build_view
from yrboard.logs import log

LOG_NAME = "forecast_worker"


def summarize(controller: WeatherController) -> str:
    view = build_view(controller.selection)
    current = view["current"]
    parts = [
        f"{controller.city['name']}: {current['current_temp']} {current['current_description']}, "
        f"{current['rain_amount']}, {current['wind_speed']}"
    ]
    for panel in view["forecast"]:
        parts.append(f"{panel['day_name']} {panel['high']}/{panel['low']} {panel['description']}")
    return " | ".join(parts)


def report(controller: WeatherController) -> None:
    log(summarize(controller), name=LOG_NAME)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Periodisk værvarsel for en norsk by")
    parser.add_argument("city", nargs="?", default=DEFAULT_CITY, choices=sorted(CITIES))
    parser.add_argument("--interval", type=int, default=FORECAST_REFRESH_SECONDS, metavar="SECONDS")
    args = parser.parse_args(argv)

    controller = WeatherController(args.city, refresh_seconds=args.interval)
    scheduler = RefreshScheduler(controller, on_refresh=report)
    log(f"Forecast worker started for {controller.city['name']} (every {args.interval}s)", name=LOG_NAME)
    scheduler.start()
    try:
        while scheduler.running:
            time.sleep(1)
    except KeyboardInterrupt:
        log("Shutdown requested (KeyboardInterrupt). Stopping refresh task.", name=LOG_NAME)
    finally:
        scheduler.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
