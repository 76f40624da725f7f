"""Configuration for spotkit."""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.spotify.com/v1"


@dataclass(frozen=True)
class APIConfig:
    """Spotify Web API configuration.

    Attributes:
        base_url: Root URL that endpoint paths are appended to.
        access_token: Bearer token sent with every request. Obtaining and
            refreshing it is the caller's responsibility.
        search_limit: Maximum number of search results to request.
        timeout: Request timeout in seconds.
    """

    base_url: str = DEFAULT_BASE_URL
    access_token: str | None = None
    search_limit: int = 20
    timeout: float = 30.0

    @property
    def headers(self) -> dict[str, str]:
        """Request headers derived from this configuration."""
        if not self.access_token:
            return {}
        return {"Authorization": f"Bearer {self.access_token}"}
