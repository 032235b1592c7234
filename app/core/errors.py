class CoachError(Exception):
    """Base class for errors raised by the wins coach backend."""

class ConfigurationError(CoachError):
    """Process-wide configuration is unusable; fatal at startup."""

class UpstreamError(CoachError):
    """The chat-completion service answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"RouteLLM error {status_code}: {body}")

class WinValidationError(CoachError):
    """A draft request is missing the win fields a draft is written from."""

    def __init__(self, message: str = "Missing win.title or win.story"):
        super().__init__(message)

class MissingCredentialError(ConfigurationError):
    """ROUTELLM_API_KEY is absent or blank."""
