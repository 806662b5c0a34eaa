# ABOUTME: Dependency container for the weather page using Pydantic BaseModel.
# ABOUTME: Holds the shared httpx.AsyncClient and the OpenWeatherMap API key used by both lookups.

import httpx
from pydantic import BaseModel, ConfigDict

USER_AGENT = "weather-web/0.1"


class WeatherDeps(BaseModel):
    """Dependencies built once at startup and shared by every request."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    http_client: httpx.AsyncClient
    api_key: str


def create_http_client() -> httpx.AsyncClient:
    """Create the shared httpx client.

    No retry transport and no explicit timeout: a failed call surfaces immediately as
    the generic fetch error, and httpx's default timeout is the only bound on a slow provider.
    """
    return httpx.AsyncClient(headers={"User-Agent": USER_AGENT})
