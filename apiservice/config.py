"""Configuration for apiservice SDK."""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


@dataclass
class APIServiceConfig:
    """
    Configuration for apiservice client.

    Attributes:
        base_url: Base URL requests are resolved against
            (default: https://jsonplaceholder.typicode.com)
        timeout: Request timeout in seconds (default: 5.0)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Example:
        ```python
        config = APIServiceConfig(
            base_url="http://localhost:3000/api",
            timeout=10.0,
        )
        ```
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 5.0
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        # Remove trailing slash from base_url
        self.base_url = self.base_url.rstrip("/")

        if self.timeout <= 0:
            raise ValueError("timeout must be greater than 0")
