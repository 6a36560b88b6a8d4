"""
ExtraHop metric API schemas - Pydantic models for the /metrics request and responses.

Only the fields marked with an alias travel under a different name on the wire.
Fields excluded from serialization drive the data point projection and are
never sent to the appliance.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .datapoints import DataPoint, keyed_data_points, simple_data_points


class Cycle(str, Enum):
    """Possible values for the cycle parameter of a metric query."""
    AUTO = "auto"
    THIRTY_SEC = "30sec"
    FIVE_MIN = "5min"
    ONE_HR = "1hr"
    TWENTY_FOUR_HR = "24hr"


class ObjectType(str, Enum):
    NETWORK = "network"
    DEVICE = "device"
    APPLICATION = "application"
    VLAN = "vlan"
    DEVICE_GROUP = "device_group"
    ACTIVITY_GROUP = "activity_group"


# ---------------- Request ----------------

class KeyPair(BaseModel):
    """
    Facet keys of a metric spec and the tag names they map to.

    Setting a key changes stats values from a list of ints to a list of
    lists of facet entries.
    """
    key1: Optional[str] = None
    key2: Optional[str] = None  # modeled by the API, not used by the projection
    opentsdb_key1: Optional[str] = Field(None, exclude=True)
    opentsdb_key2: Optional[str] = Field(None, exclude=True)

    @field_validator("key1", "key2", mode="before")
    @classmethod
    def _empty_key_is_unset(cls, v):
        return v or None


class MetricSpec(KeyPair):
    name: str
    calc_type: str = ""
    percentiles: Optional[List[int]] = None
    opentsdb_metric: Optional[str] = Field(None, exclude=True)

    @field_validator("percentiles", mode="before")
    @classmethod
    def _empty_percentiles_is_unset(cls, v):
        return v or None


class MetricQuery(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    cycle: Cycle
    from_: int = Field(..., alias="from")
    until: int
    category: str = Field(..., alias="metric_category")
    object_type: ObjectType
    # Order matters: stats values are index-aligned with the specs
    specs: List[MetricSpec] = Field(..., alias="metric_specs")
    object_ids: List[int]

    def to_payload(self) -> Dict[str, Any]:
        """Render the JSON body sent to the appliance."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


# ---------------- Responses ----------------

class MetricStat(BaseModel):
    duration: int = 0
    oid: int = 0
    time: int = 0  # milliseconds


class MetricStatSimple(MetricStat):
    values: List[int] = []


class FacetKey(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    key_type: str = ""
    str_: str = Field("", alias="str")


class KeyedValue(BaseModel):
    key: FacetKey
    value: int
    vtype: str = ""


class MetricStatKeyed(MetricStat):
    values: List[List[KeyedValue]] = []


class MetricResponseBase(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    cycle: str = ""
    from_: int = Field(0, alias="from")
    node_id: int = 0
    until: int = 0


class MetricResponseSimple(MetricResponseBase):
    stats: List[MetricStatSimple] = []

    def to_data_points(
        self, metric_names: List[str], object_key: str, object_id_to_name: Dict[int, str]
    ) -> List[DataPoint]:
        """Project the stats into data points, see datapoints.simple_data_points()."""
        return simple_data_points(self, metric_names, object_key, object_id_to_name)


class MetricResponseKeyed(MetricResponseBase):
    stats: List[MetricStatKeyed] = []

    def to_data_points(
        self, specs: List[MetricSpec], object_key: str, object_id_to_name: Dict[int, str]
    ) -> List[DataPoint]:
        """Project the faceted stats into data points, see datapoints.keyed_data_points()."""
        return keyed_data_points(self, specs, object_key, object_id_to_name)
