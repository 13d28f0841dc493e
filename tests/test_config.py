"""
tests/test_config.py
"""

from __future__ import annotations

import importlib

from tripgeo import config


def test_defaults():
    assert config.CLUSTER_MAX_DISTANCE_M == 1000.0
    assert config.QUALITY_DISPERSED_RADIUS_M == 2000.0
    assert config.QUALITY_MAX_CLUSTERS_PER_DAY == 4.0
    assert config.COORD_MIN_OFFSET_M == 10.0
    assert config.COORD_WGS84_HINT_THRESHOLD_M == 10.0


def test_environment_override(monkeypatch):
    monkeypatch.setenv("CLUSTER_MAX_DISTANCE_M", "250")
    try:
        importlib.reload(config)
        assert config.CLUSTER_MAX_DISTANCE_M == 250.0
    finally:
        monkeypatch.delenv("CLUSTER_MAX_DISTANCE_M")
        importlib.reload(config)
    assert config.CLUSTER_MAX_DISTANCE_M == 1000.0
