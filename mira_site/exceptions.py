"""Exception classes for mira-site operations."""


class GitHubAPIError(Exception):
    """Raised when a GitHub request cannot be completed."""

    def __init__(
        self, message: str, url: str | None = None, status: int | None = None
    ) -> None:
        """Initialize GitHub API error.

        Args:
            message: Error message describing the failure.
            url: Optional URL of the request that failed.
            status: Optional HTTP status code returned by GitHub.

        """
        super().__init__(message)
        self.message = message
        self.url = url
        self.status = status

    def __str__(self) -> str:
        """Return string representation of the error.

        Returns:
            Formatted error message with status and URL if available.

        """
        details = self.message
        if self.status is not None:
            details = f"HTTP {self.status}: {details}"
        if self.url:
            return f"GitHub request failed for '{self.url}': {details}"
        return f"GitHub request failed: {details}"


class ConfigurationError(Exception):
    """Raised when settings cannot be loaded or applied."""

    def __init__(self, message: str, key: str | None = None) -> None:
        """Initialize configuration error.

        Args:
            message: Error message describing the problem.
            key: Optional name of the offending settings key.

        """
        super().__init__(message)
        self.message = message
        self.key = key

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.key:
            return f"Invalid configuration for '{self.key}': {self.message}"
        return f"Invalid configuration: {self.message}"
