"""Exception hierarchy for halton_bus.

All errors raised while refreshing a cached source inherit from
:class:`BusAPIError`. The service layer never catches them; a failed refresh
leaves previously cached data exactly as it was.

Subclass hierarchy::

    BusAPIError
    +-- TransportError   network or HTTP failure reaching a resource
    +-- ParseError       malformed document, or an expected element is missing
    +-- FormatError      a date-time field is missing or has the wrong pattern
"""


class BusAPIError(Exception):
    """Base exception for all halton_bus errors."""


class TransportError(BusAPIError):
    """Raised when the feed or status page cannot be retrieved."""

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class ParseError(BusAPIError):
    """Raised for malformed XML/HTML or a missing required element."""


class FormatError(BusAPIError):
    """Raised when a date-time field does not match the expected pattern."""
