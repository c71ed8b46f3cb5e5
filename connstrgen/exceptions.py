"""
Exceptions raised by connstrgen.

Only the configuration layer raises; the encoders and builders are total.
"""


class ConnStrConfigurationError(ValueError):
    """Raised when a connection config entry is missing, unreadable or invalid."""
