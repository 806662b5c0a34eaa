# ABOUTME: Pure formatting of geocoding and weather models into display strings.
# ABOUTME: Appends units, converts sunrise/sunset epochs to local clock time, builds the location label.

from datetime import datetime, tzinfo

from weather_web.models import CurrentConditions, GeocodeCandidate, Number, WeatherDisplay

MISSING_VALUE = "N/A"


def format_location(candidate: GeocodeCandidate) -> str:
    """Label as "name, state, country"; an empty state still leaves its segment."""
    return f"{candidate.name}, {candidate.state}, {candidate.country}"


def with_unit(value: Number | None, unit: str) -> str:
    """Append a unit to the provider value as-is, without rounding."""
    if value is None:
        return MISSING_VALUE
    return f"{value}{unit}"


def format_clock_time(epoch_seconds: int, tz: tzinfo | None = None) -> str:
    """Format a Unix timestamp as H:MM:SS in ``tz``, or the server's local timezone when omitted."""
    moment = datetime.fromtimestamp(epoch_seconds, tz)
    return f"{moment.hour}:{moment.minute:02d}:{moment.second:02d}"


def build_weather_display(
    candidate: GeocodeCandidate,
    conditions: CurrentConditions,
    tz: tzinfo | None = None,
) -> WeatherDisplay:
    condition = conditions.weather[0]
    return WeatherDisplay(
        location=format_location(candidate),
        temperature=with_unit(conditions.temp, "°C"),
        description=condition.description,
        humidity=with_unit(conditions.humidity, "%"),
        wind_speed=with_unit(conditions.wind_speed, "m/s"),
        wind_gust=with_unit(conditions.wind_gust, "m/s"),
        pressure=with_unit(conditions.pressure, "hPa"),
        visibility=with_unit(conditions.visibility, "m"),
        sunrise=format_clock_time(conditions.sunrise, tz),
        sunset=format_clock_time(conditions.sunset, tz),
        icon=condition.icon,
    )
