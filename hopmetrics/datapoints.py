"""
Projection of ExtraHop metric responses into generic time-series data points.

Stats values are index-aligned with the metric specs of the query that
produced them: value i of every stat record belongs to spec i.
"""

import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List

from .errors import ProjectionError

if TYPE_CHECKING:
    from .schemas import MetricResponseKeyed, MetricResponseSimple, MetricSpec, MetricStat

logger = logging.getLogger("hopmetrics.datapoints")


@dataclass
class DataPoint:
    """Single time-series data point"""
    metric: str
    timestamp: int  # epoch seconds
    tags: Dict[str, str] = None
    value: int = 0

    def __post_init__(self):
        if self.tags is None:
            self.tags = {}

    def to_dict(self) -> Dict[str, Any]:
        """OpenTSDB /api/put representation"""
        return {
            "metric": self.metric,
            "timestamp": self.timestamp,
            "value": self.value,
            "tags": dict(self.tags),
        }


def to_json(points: List[DataPoint]) -> str:
    """Serialize data points as a JSON array ready for OpenTSDB ingestion."""
    return json.dumps([p.to_dict() for p in points])


def _resolve_record(stat: "MetricStat", object_id_to_name: Dict[int, str], points: List[DataPoint]) -> str:
    """Validate a stat record, returning the display name of its object."""
    name = object_id_to_name.get(stat.oid)
    if name is None:
        raise ProjectionError(f"no name found for oid {stat.oid}", points)
    if stat.time < 1:
        raise ProjectionError("encountered a time less than 1", points)
    return name


def simple_data_points(
    response: "MetricResponseSimple",
    metric_names: List[str],
    object_key: str,
    object_id_to_name: Dict[int, str],
) -> List[DataPoint]:
    """
    Convert an unfaceted metric response to data points.

    Args:
        response: Decoded simple response
        metric_names: Output metric names, index-aligned with the query specs
        object_key: Tag name for the object (e.g., "device")
        object_id_to_name: Object id to display name mapping

    Returns:
        One data point per value, in record then value order

    Raises:
        ProjectionError: On an unknown oid, a time below 1 or a value without
            a metric name; carries the points emitted so far
    """
    points: List[DataPoint] = []
    for stat in response.stats:
        name = _resolve_record(stat, object_id_to_name, points)
        for i, value in enumerate(stat.values):
            if i >= len(metric_names):
                raise ProjectionError(f"no corresponding metric name at index {i}", points)
            points.append(DataPoint(
                metric=metric_names[i],
                timestamp=stat.time // 1000,
                tags={object_key: name},
                value=value,
            ))

    logger.debug(f"projected {len(response.stats)} stat records into {len(points)} data points")
    return points


def keyed_data_points(
    response: "MetricResponseKeyed",
    specs: List["MetricSpec"],
    object_key: str,
    object_id_to_name: Dict[int, str],
) -> List[DataPoint]:
    """
    Convert a faceted metric response to data points, one per facet entry.

    Each point is tagged with the object name under object_key and with the
    facet key string under the spec's opentsdb_key1. Only the first key is
    projected; key2 has no tag mapping yet.
    """
    points: List[DataPoint] = []
    for stat in response.stats:
        name = _resolve_record(stat, object_id_to_name, points)
        for i, entries in enumerate(stat.values):
            if i >= len(specs):
                raise ProjectionError(f"no corresponding metric name at index {i}", points)
            spec = specs[i]
            if not spec.opentsdb_metric:
                raise ProjectionError(f"no output metric configured for spec {spec.name!r} at index {i}", points)
            if not spec.opentsdb_key1:
                raise ProjectionError(f"no facet tag configured for spec {spec.name!r} at index {i}", points)
            for entry in entries:
                points.append(DataPoint(
                    metric=spec.opentsdb_metric,
                    timestamp=stat.time // 1000,
                    tags={object_key: name, spec.opentsdb_key1: entry.key.str_},
                    value=entry.value,
                ))

    logger.debug(f"projected {len(response.stats)} keyed stat records into {len(points)} data points")
    return points
