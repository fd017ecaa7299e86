class WeatherError(RuntimeError):
    """Base error for the weather display."""


class EmptyTimeseries(WeatherError):
    """Raised when there are no samples to select from."""


class ForecastFetchError(WeatherError):
    """Raised when the Locationforecast request fails."""


class ForecastFormatError(ForecastFetchError):
    """Raised when the Locationforecast payload is malformed."""


class UnknownCity(WeatherError, KeyError):
    """Raised for a city key that is not in the directory."""

    def __str__(self) -> str:
        return f"Unknown city: {self.args[0]}" if self.args else "Unknown city"

