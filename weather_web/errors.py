# ABOUTME: Typed failure kinds for the geocode-then-weather lookup.
# ABOUTME: Maps every internal failure to one of the two messages shown on the page.

from enum import Enum

NO_DATA_MESSAGE = "No data found for this location."
FETCH_FAILED_MESSAGE = "Failed to fetch data."


class FetchErrorKind(Enum):
    TRANSPORT = "transport"
    EMPTY_RESULT = "empty_result"
    MALFORMED_RESPONSE = "malformed_response"


class WeatherFetchError(Exception):
    """A lookup failure tagged with its kind; the message is for the server log only."""

    def __init__(self, kind: FetchErrorKind, message: str):
        super().__init__(message)
        self.kind = kind

    @property
    def public_message(self) -> str:
        if self.kind is FetchErrorKind.EMPTY_RESULT:
            return NO_DATA_MESSAGE
        return FETCH_FAILED_MESSAGE
