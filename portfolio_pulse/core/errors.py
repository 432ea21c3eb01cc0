class PortfolioPulseError(Exception):
    """Base exception for application-level errors."""


class ProviderNotFoundError(PortfolioPulseError):
    """Raised when a provider id cannot be resolved."""


class ProviderExecutionError(PortfolioPulseError):
    """Raised when a provider fails to execute."""


class NewsFetchError(ProviderExecutionError):
    """Raised when the news provider call fails or returns an unusable payload."""


class GenerationError(ProviderExecutionError):
    """Raised when the text-generation provider fails or returns no generations."""


class ValidationError(PortfolioPulseError):
    """Raised when request payload fails domain-level validation."""
