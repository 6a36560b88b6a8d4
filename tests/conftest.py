"""Pytest configuration and shared fixtures"""
import json
import os
import sys
from unittest.mock import MagicMock

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hopmetrics import MetricSpec


# Real-world response shapes from the ExtraHop /api/v1/metrics endpoint
SIMPLE_RESPONSE = {
    "cycle": "5min",
    "from": 1500000000000,
    "until": 1500000600000,
    "node_id": 0,
    "stats": [
        {"duration": 300000, "oid": 42, "time": 1500000300000, "values": [1024, 2048]},
        {"duration": 300000, "oid": 43, "time": 1500000300000, "values": [512, 0]},
        {"duration": 300000, "oid": 42, "time": 1500000600000, "values": [4096, 8192]},
    ]
}

KEYED_RESPONSE = {
    "cycle": "5min",
    "from": 1500000000000,
    "until": 1500000600000,
    "node_id": 0,
    "stats": [
        {
            "duration": 300000,
            "oid": 42,
            "time": 1500000300000,
            "values": [
                [
                    {"key": {"key_type": "string", "str": "HTTP"}, "value": 5000, "vtype": "count"},
                    {"key": {"key_type": "string", "str": "SSL"}, "value": 7000, "vtype": "count"},
                ],
                [
                    {"key": {"key_type": "string", "str": "HTTP"}, "value": 12, "vtype": "count"},
                ],
            ]
        },
        {
            "duration": 300000,
            "oid": 43,
            "time": 1500000300000,
            "values": [
                [
                    {"key": {"key_type": "string", "str": "DNS"}, "value": 300, "vtype": "count"},
                ],
                [],
            ]
        },
    ]
}

OBJECT_NAMES = {42: "web01", 43: "db01"}


def _make_response(body, status=200):
    """Build a urlopen() context manager mock returning body"""
    if not isinstance(body, bytes):
        body = json.dumps(body).encode()
    mock_response = MagicMock()
    mock_response.status = status
    mock_response.read.return_value = body
    mock_response.__enter__.return_value = mock_response
    mock_response.__exit__.return_value = False
    return mock_response


@pytest.fixture
def simple_response_body():
    return json.loads(json.dumps(SIMPLE_RESPONSE))


@pytest.fixture
def keyed_response_body():
    return json.loads(json.dumps(KEYED_RESPONSE))


@pytest.fixture
def object_names():
    return dict(OBJECT_NAMES)


@pytest.fixture
def keyed_specs():
    """Specs matching KEYED_RESPONSE: bytes and requests by L7 protocol"""
    return [
        MetricSpec(name="bytes", key1="/./", opentsdb_metric="extrahop.device.l7.bytes", opentsdb_key1="proto"),
        MetricSpec(name="req", key1="/./", opentsdb_metric="extrahop.device.l7.req", opentsdb_key1="proto"),
    ]


@pytest.fixture
def make_response():
    return _make_response
