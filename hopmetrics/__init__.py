"""ExtraHop REST API v1 metrics client with OpenTSDB data point projection."""

from .client import ExtraHopClient
from .config import ExtraHopConfig
from .datapoints import DataPoint, keyed_data_points, simple_data_points, to_json
from .errors import (
    ApiStatusError,
    DecodeError,
    ExtraHopError,
    ProjectionError,
    RequestBuildError,
    TransportError,
)
from .http_client import ExtraHopHttpClient
from .schemas import (
    Cycle,
    KeyedValue,
    MetricQuery,
    MetricResponseKeyed,
    MetricResponseSimple,
    MetricSpec,
    ObjectType,
)

__all__ = [
    "ApiStatusError",
    "Cycle",
    "DataPoint",
    "DecodeError",
    "ExtraHopClient",
    "ExtraHopConfig",
    "ExtraHopError",
    "ExtraHopHttpClient",
    "KeyedValue",
    "MetricQuery",
    "MetricResponseKeyed",
    "MetricResponseSimple",
    "MetricSpec",
    "ObjectType",
    "ProjectionError",
    "RequestBuildError",
    "TransportError",
    "keyed_data_points",
    "simple_data_points",
    "to_json",
]
