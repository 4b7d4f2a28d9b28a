"""
Exceptions raised locally by the Seacloud client.

Transport, HTTP and JSON decoding failures are not wrapped: callers see the
``requests`` exceptions unchanged.
"""


class SeacloudError(Exception):
    """Base class for errors raised by the client itself."""


class SeacloudPreconditionError(SeacloudError, RuntimeError):
    """Raised when an operation is attempted in the wrong session state."""


class SeacloudDecodeError(SeacloudError, ValueError):
    """Raised when a response body does not match the expected record shape."""
