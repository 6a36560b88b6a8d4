"""Exceptions raised by the hopmetrics client."""

from typing import List, Optional


class ExtraHopError(Exception):
    """Base class for all hopmetrics errors."""


class RequestBuildError(ExtraHopError):
    """The request could not be built (bad URL or unserializable payload)."""


class TransportError(ExtraHopError):
    """Network or connection failure while talking to the appliance."""


class ApiStatusError(ExtraHopError):
    """The appliance answered with a status other than 200."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"Response Code {status_code}: {body}")


class DecodeError(ExtraHopError):
    """The response body does not match the expected schema."""


class ProjectionError(ExtraHopError):
    """
    A decoded response could not be turned into data points.

    ``data_points`` holds the points emitted before the failing record.
    """

    def __init__(self, message: str, data_points: Optional[List] = None):
        self.data_points = data_points if data_points is not None else []
        super().__init__(message)
