"""ExtraHop REST API v1 client for metric queries."""

import logging
from typing import List, Optional

from pydantic import ValidationError

from .config import ExtraHopConfig
from .errors import RequestBuildError
from .http_client import ExtraHopHttpClient
from .schemas import MetricQuery, MetricResponseKeyed, MetricResponseSimple, MetricSpec

logger = logging.getLogger("hopmetrics.client")

METRICS_PATH = "metrics"


def _build_query(cycle, category, object_type, from_ms, until_ms, specs, object_ids) -> MetricQuery:
    # Emptiness and from < until are left to the appliance to reject
    try:
        return MetricQuery(
            cycle=cycle,
            category=category,
            object_type=object_type,
            from_=from_ms,
            until=until_ms,
            specs=list(specs),
            object_ids=list(object_ids),
        )
    except ValidationError as e:
        raise RequestBuildError(f"invalid metric query: {e}") from e


class ExtraHopClient:
    """
    Client for the ExtraHop metrics API.

    Holds only the appliance URL and API key, so one instance can be shared
    between threads.
    """

    def __init__(self, api_url: str, api_key: str, timeout: Optional[float] = None, verify_ssl: bool = True):
        """
        Initialize ExtraHop client.

        Args:
            api_url: Base URL of the appliance (e.g., https://extrahop.example.com)
            api_key: REST API key
            timeout: Request timeout in seconds, None for the library default
            verify_ssl: Verify the appliance certificate
        """
        self._http = ExtraHopHttpClient(api_url, api_key, timeout=timeout, verify_ssl=verify_ssl)

    @classmethod
    def from_config(cls, config: ExtraHopConfig) -> "ExtraHopClient":
        return cls(config.api_url, config.api_key, timeout=config.timeout, verify_ssl=config.verify_ssl)

    @property
    def api_url(self) -> str:
        return self._http.api_url

    @property
    def api_key(self) -> str:
        return self._http.api_key

    def simple_metric_query(
        self,
        cycle: str,
        category: str,
        object_type: str,
        from_ms: int,
        until_ms: int,
        metric_names: List[str],
        object_ids: List[int],
    ) -> MetricResponseSimple:
        """
        Query metrics without facets ("keys").

        Args:
            cycle: One of the Cycle values (e.g., "5min")
            category: Metric category (e.g., "net", "app")
            object_type: One of the ObjectType values (e.g., "device")
            from_ms: Start of the window, epoch milliseconds
            until_ms: End of the window, epoch milliseconds
            metric_names: Metric names; stats values follow this order
            object_ids: Ids of the objects to query

        Returns:
            Decoded response with one int value per metric name in each stat
        """
        try:
            specs = [MetricSpec(name=name) for name in metric_names]
        except ValidationError as e:
            raise RequestBuildError(f"invalid metric names: {e}") from e
        query = _build_query(cycle, category, object_type, from_ms, until_ms, specs, object_ids)
        response = self._http.post(METRICS_PATH, query.to_payload(), MetricResponseSimple)
        logger.debug(f"simple metric query returned {len(response.stats)} stats")
        return response

    def keyed_metric_query(
        self,
        cycle: str,
        category: str,
        object_type: str,
        from_ms: int,
        until_ms: int,
        specs: List[MetricSpec],
        object_ids: List[int],
    ) -> MetricResponseKeyed:
        """
        Query metrics with facets ("keys"), for example bytes by L7 protocol.

        The specs carry their facet keys and the output metric/tag names used
        later by MetricResponseKeyed.to_data_points().
        """
        query = _build_query(cycle, category, object_type, from_ms, until_ms, specs, object_ids)
        response = self._http.post(METRICS_PATH, query.to_payload(), MetricResponseKeyed)
        logger.debug(f"keyed metric query returned {len(response.stats)} stats")
        return response
