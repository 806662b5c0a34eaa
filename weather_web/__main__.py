# ABOUTME: Process entry point: validates configuration, configures logging, and serves the app with uvicorn.
# ABOUTME: Exits with status 1 before binding a port when API_KEY is not set.

import logging

import uvicorn

from weather_web.config import load_api_key, load_server_settings
from weather_web.deps import WeatherDeps, create_http_client
from weather_web.web import create_app

logger = logging.getLogger(__name__)


def main() -> None:
    settings = load_server_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    api_key = load_api_key()

    app = create_app(WeatherDeps(http_client=create_http_client(), api_key=api_key))
    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
