"""Custom exceptions for spotkit.

All exceptions include an HTTP status_code attribute for easy
integration with web frameworks like FastAPI.
"""


class SpotKitError(Exception):
    """Base exception for spotkit.

    Attributes:
        status_code: HTTP status code for API error responses.
    """

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ItemDecodeError(SpotKitError):
    """A directly requested item could not be decoded.

    Raised when a payload is not valid JSON, or when required fields are
    missing or have the wrong type. Response containers (library and search
    listings) never raise this; they degrade to empty results instead.
    """

    status_code: int = 422  # Unprocessable Entity


class ItemContractError(SpotKitError):
    """A decoded item violates an invariant the Web API guarantees.

    Raised by derived accessors, e.g. asking for the primary artist of a
    track with no artists, or the cover art of an album with no images.
    This signals a programming error and is never caught by the decoders.
    """

    status_code: int = 500  # Internal Server Error


class APIError(SpotKitError):
    """Spotify Web API error.

    Raised when the underlying API request fails.
    """

    status_code: int = 502  # Bad Gateway (upstream failure)


class TransportError(APIError):
    """HTTP request did not complete with a 2xx response.

    Attributes:
        http_status: Status code of the received response, if any.
    """

    def __init__(self, message: str, http_status: int | None = None) -> None:
        super().__init__(message)
        self.http_status = http_status


class AuthenticationRequiredError(APIError):
    """The request was rejected for lack of a valid access token."""

    status_code: int = 401  # Unauthorized


class ItemNotFoundError(APIError):
    """Requested item does not exist or is not visible to the user."""

    status_code: int = 404  # Not Found
