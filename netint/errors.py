"""
Exception hierarchy for netint
"""

from typing import Any, Optional


class NetintError(Exception):
    """Base class for all netint errors"""


class UnknownRegion(NetintError, ValueError):
    """Region name outside the fixed registry"""

    def __init__(self, name: Any):
        self.name = name
        super().__init__(f"'{name}' is not a valid datacenter")


class TransportFailure(NetintError):
    """
    The HTTP fetch failed.

    Covers network errors, timeouts and non-success status codes.
    The underlying httpx exception, if any, is chained as __cause__.
    """

    def __init__(self, url: str, reason: str, status_code: Optional[int] = None):
        self.url = url
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"request to {url} failed: {reason}")


class MalformedResponse(NetintError, ValueError):
    """Response body is not JSON or does not have the six-region shape"""


class MalformedMeasurement(MalformedResponse):
    """A single measurement field failed type, range or parse validation"""

    def __init__(self, region: str, field: str, value: Any, reason: str):
        self.region = region
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(
            f"invalid {field} for destination '{region}': {reason} (got {value!r})"
        )
