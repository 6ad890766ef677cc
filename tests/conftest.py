"""
Shared fixtures for traffic tests.
"""

import pytest

from bikeflow.traffic.types import Station
from builders import trip


@pytest.fixture()
def stations():
    return [
        Station(short_name="A32000", lon=-71.09, lat=42.36, name="Kendall"),
        Station(short_name="B32001", lon=-71.10, lat=42.35, name="MIT"),
        Station(short_name="C32002", lon=-71.08, lat=42.37, name="Lechmere"),
    ]


@pytest.fixture()
def trips():
    return [
        trip("A32000", "B32001", 480, 495),    # 8:00 -> 8:15
        trip("A32000", "C32002", 600, 620),    # 10:00 -> 10:20
        trip("B32001", "A32000", 1020, 1050),  # 17:00 -> 17:30
        trip("C32002", "A32000", 1380, 1420),  # 23:00 -> 23:40
        trip("A32000", "Z99999", 610, 640),    # unknown end station
    ]
