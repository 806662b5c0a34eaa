# ABOUTME: Pydantic BaseModels for location queries, OpenWeatherMap responses, and page display data.
# ABOUTME: Defines the request-scoped types that flow from the form through geocoding to rendering.

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# JSON integers stay integers so "7" is not rendered as "7.0"
Number = int | float


class LocationQuery(BaseModel):
    """Location entered in the search form."""

    city: str
    state: str = ""
    country: str = ""

    def to_query_string(self) -> str:
        """Join the non-empty parts with ", " (city, state code, ISO 3166 country code)."""
        return ", ".join(part for part in (self.city, self.state, self.country) if part)


class GeocodeCandidate(BaseModel):
    """One match from the direct geocoding endpoint."""

    name: str
    lat: float
    lon: float
    state: str = ""
    country: str = ""


class WeatherCondition(BaseModel):
    """One entry of the provider's ``weather`` array."""

    description: str
    icon: str


class CurrentConditions(BaseModel):
    """The ``current`` block of a One Call response requested with ``units=metric``."""

    temp: Number
    humidity: Number
    wind_speed: Number
    wind_gust: Number | None = None
    pressure: Number
    visibility: Number
    sunrise: int
    sunset: int
    weather: list[WeatherCondition] = Field(min_length=1)


class WeatherDisplay(BaseModel):
    """Display-ready weather fields, serialized with the camelCase keys the page uses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    location: str
    temperature: str
    description: str
    humidity: str
    wind_speed: str
    wind_gust: str
    pressure: str
    visibility: str
    sunrise: str
    sunset: str
    icon: str


class WeatherError(BaseModel):
    """The single-key error shape shown instead of weather data."""

    error: str
