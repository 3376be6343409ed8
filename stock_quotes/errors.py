class ConfigurationError(RuntimeError):
    """Raised when a required deployment setting is missing."""


class QuoteFeedError(RuntimeError):
    """Raised when the quotes endpoint cannot be reached or breaks its contract."""
