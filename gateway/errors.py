"""
Exceptions raised by the advice gateway.

Only ValidationError ever reaches an HTTP caller (as a 400). ProviderError
is raised by provider implementations and converted to fallback content
inside the gateway.
"""


class GatewayError(Exception):
    """Base class for gateway errors."""


class ValidationError(GatewayError):
    """
    Raised when a required input is missing or malformed, e.g. an empty
    chat message or an empty list of psychometric responses.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ProviderError(GatewayError):
    """
    Raised when the text-generation provider cannot produce a reply
    (network, auth, quota or malformed response).
    """

    def __init__(self, message: str, provider: str = "gemini"):
        self.provider = provider
        super().__init__(f"{provider}: {message}")
