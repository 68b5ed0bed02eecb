class ConfigError(Exception):
    """Raised for missing or invalid configuration."""


class ApiError(Exception):
    """Raised when a NewsAPI request fails."""

    default_message = "NewsAPI request failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class UrlBuildError(ApiError):
    default_message = "Url Parsing Failed"


class TransportError(ApiError):
    default_message = "Failed fetching articles"


class ResponseReadError(ApiError):
    default_message = "Failed converting response to string"


class ParseError(ApiError):
    default_message = "Article Parsing Failed"


class BadRequest(ApiError):
    """NewsAPI answered, but reported a non-ok status."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Request failed: {message}")
