# ABOUTME: ASGI web entry point for the weather page.
# ABOUTME: Creates a Starlette app serving the search form, the get-weather handler, and static assets.

import contextlib
import logging
from pathlib import Path

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.routing import Mount, Route
from starlette.staticfiles import StaticFiles
from starlette.templating import Jinja2Templates

from weather_web.deps import WeatherDeps
from weather_web.errors import FetchErrorKind, WeatherFetchError
from weather_web.formatting import build_weather_display
from weather_web.models import LocationQuery, WeatherDisplay, WeatherError
from weather_web.weather_service import geocode, get_current_conditions

logger = logging.getLogger(__name__)

PACKAGE_DIR = Path(__file__).parent
templates = Jinja2Templates(directory=PACKAGE_DIR / "templates")


async def lookup_weather(deps: WeatherDeps, query: LocationQuery) -> WeatherDisplay:
    """Geocode the query, fetch conditions for the best match, and format them.

    The first failing step raises WeatherFetchError and the remaining steps are skipped.
    """
    location = query.to_query_string()
    try:
        candidates = await geocode(deps.http_client, location, deps.api_key)
        if not candidates:
            raise WeatherFetchError(FetchErrorKind.EMPTY_RESULT, f"No geocoding match for {location!r}")
        best = candidates[0]
        conditions = await get_current_conditions(deps.http_client, best.lat, best.lon, deps.api_key)
        return build_weather_display(best, conditions)
    except (httpx.HTTPError, RuntimeError) as e:
        # RuntimeError covers a client used after aclose()
        raise WeatherFetchError(FetchErrorKind.TRANSPORT, f"Request for {location!r} failed: {e!r}") from e
    except (ValueError, OverflowError, OSError) as e:
        # Timestamps the platform cannot convert to local time
        raise WeatherFetchError(
            FetchErrorKind.MALFORMED_RESPONSE, f"Cannot format data for {location!r}: {e}"
        ) from e


async def fetch_weather_display(deps: WeatherDeps, query: LocationQuery) -> WeatherDisplay | WeatherError:
    """Run the lookup and collapse any failure into the error shown on the page."""
    try:
        return await lookup_weather(deps, query)
    except WeatherFetchError as e:
        if e.kind is FetchErrorKind.EMPTY_RESULT:
            logger.info("%s", e)
        else:
            logger.exception("Error fetching data (%s)", e.kind.value)
        return WeatherError(error=e.public_message)


def render_page(request: Request, result: WeatherDisplay | WeatherError | None = None):
    weather_data = result.model_dump(by_alias=True) if result is not None else {}
    return templates.TemplateResponse(request, "index.html", {"weather_data": weather_data})


async def index(request: Request):
    return render_page(request)


async def get_weather(request: Request):
    form = await request.form()
    query = LocationQuery(
        city=str(form.get("city", "")).strip(),
        state=str(form.get("state", "")).strip(),
        country=str(form.get("country", "")).strip(),
    )
    result = await fetch_weather_display(request.app.state.deps, query)
    return render_page(request, result)


def create_app(deps: WeatherDeps) -> Starlette:
    """Build the ASGI app around dependencies created at startup."""

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    app = Starlette(
        routes=[
            Route("/", index, methods=["GET"]),
            Route("/get-weather", get_weather, methods=["POST"]),
            Mount("/static", app=StaticFiles(directory=PACKAGE_DIR / "static"), name="static"),
        ],
        lifespan=lifespan,
    )
    app.state.deps = deps
    return app
