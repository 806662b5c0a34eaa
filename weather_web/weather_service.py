# ABOUTME: Service layer for OpenWeatherMap API calls and response parsing.
# ABOUTME: Handles direct geocoding and One Call current-conditions retrieval.

import httpx
from pydantic import TypeAdapter, ValidationError

from weather_web.errors import FetchErrorKind, WeatherFetchError
from weather_web.models import CurrentConditions, GeocodeCandidate

GEOCODING_URL = "https://api.openweathermap.org/geo/1.0/direct"
ONE_CALL_URL = "https://api.openweathermap.org/data/3.0/onecall"

# Only the "current" block is rendered
EXCLUDE_PARAMS = "minutely,hourly,daily,alerts"

_candidates_adapter = TypeAdapter(list[GeocodeCandidate])


async def geocode(client: httpx.AsyncClient, location_query: str, api_key: str) -> list[GeocodeCandidate]:
    """Resolve a free-text location to candidate matches, best match first."""
    resp = await client.get(GEOCODING_URL, params={"q": location_query, "appid": api_key})
    resp.raise_for_status()
    data = _json_body(resp)

    try:
        return _candidates_adapter.validate_python(data)
    except ValidationError as e:
        raise WeatherFetchError(FetchErrorKind.MALFORMED_RESPONSE, f"Unexpected geocoding payload: {e}") from e


async def get_current_conditions(
    client: httpx.AsyncClient,
    lat: float,
    lon: float,
    api_key: str,
) -> CurrentConditions:
    """Fetch current weather conditions in metric units from the One Call API."""
    resp = await client.get(
        ONE_CALL_URL,
        params={
            "lat": lat,
            "lon": lon,
            "appid": api_key,
            "units": "metric",
            "exclude": EXCLUDE_PARAMS,
        },
    )
    resp.raise_for_status()
    data = _json_body(resp)

    if not isinstance(data, dict) or "current" not in data:
        raise WeatherFetchError(FetchErrorKind.MALFORMED_RESPONSE, "One Call response has no 'current' block")
    try:
        return CurrentConditions.model_validate(data["current"])
    except ValidationError as e:
        raise WeatherFetchError(FetchErrorKind.MALFORMED_RESPONSE, f"Unexpected current conditions: {e}") from e


def _json_body(resp: httpx.Response):
    """Decode a JSON body, tagging undecodable payloads as malformed."""
    try:
        return resp.json()
    except ValueError as e:
        raise WeatherFetchError(
            FetchErrorKind.MALFORMED_RESPONSE, f"Response body is not JSON (status {resp.status_code})"
        ) from e
