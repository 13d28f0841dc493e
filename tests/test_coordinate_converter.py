"""
tests/test_coordinate_converter.py
WGS84 ⇄ GCJ-02 conversion, geofence and WGS84 heuristic.
"""

from __future__ import annotations

import math

import pytest

from tripgeo.modules.geo.coordinate_converter import (
    LngLat,
    approximate_offset_m,
    batch_wgs84_to_gcj02,
    gcj02_to_wgs84,
    is_possibly_wgs84,
    out_of_china,
    wgs84_to_gcj02,
)

CITIES = [
    ("beijing", 116.404, 39.915),
    ("shanghai", 121.472, 31.231),
    ("guangzhou", 113.264, 23.129),
    ("shenzhen", 114.057, 22.543),
    ("chengdu", 104.066, 30.572),
    ("xian", 108.939, 34.341),
    ("hangzhou", 120.153, 30.287),
]


# ── wgs84_to_gcj02 ────────────────────────────────────────────────────────────

def test_tiananmen_is_shifted_by_less_than_a_kilometre():
    lng, lat = 116.391, 39.9075
    gcj = wgs84_to_gcj02(lng, lat)

    assert gcj.lng != lng and gcj.lat != lat
    assert 0 < abs(gcj.lng - lng) < 0.01
    assert 0 < abs(gcj.lat - lat) < 0.01


def test_oriental_pearl_tower_lands_in_expected_window():
    gcj = wgs84_to_gcj02(121.4995, 31.2415)
    assert 121.49 < gcj.lng < 121.52
    assert 31.23 < gcj.lat < 31.25


@pytest.mark.parametrize("name,lng,lat", CITIES[:4])
def test_offset_is_between_50_and_650_metres(name, lng, lat):
    gcj = wgs84_to_gcj02(lng, lat)
    d_x = (gcj.lng - lng) * 111000 * math.cos(lat * math.pi / 180)
    d_y = (gcj.lat - lat) * 111000
    offset = math.sqrt(d_x ** 2 + d_y ** 2)
    assert 50 < offset < 650, name


@pytest.mark.parametrize("lng,lat", [(73.0, 54.0), (135.0, 20.0)])
def test_points_near_bounding_box_corners_are_converted(lng, lat):
    gcj = wgs84_to_gcj02(lng, lat)
    assert gcj.lng != lng
    assert gcj.lat != lat


@pytest.mark.parametrize("lng,lat", [(72.004, 0.8293), (137.8347, 55.8271)])
def test_exact_bounding_box_corners_are_inside(lng, lat):
    assert out_of_china(lng, lat) is False
    gcj = wgs84_to_gcj02(lng, lat)
    assert math.isfinite(gcj.lng) and math.isfinite(gcj.lat)


@pytest.mark.parametrize(
    "lng,lat",
    [
        (-73.9857, 40.7580),   # New York
        (0.0, 0.0),
        (-122.4194, 37.7749),  # San Francisco
        (90.0, 80.0),          # far north
        (-0.1276, 51.5074),    # London
    ],
)
def test_identity_outside_china(lng, lat):
    assert wgs84_to_gcj02(lng, lat) == (lng, lat)
    assert gcj02_to_wgs84(lng, lat) == (lng, lat)


def test_result_is_a_named_lng_lat_pair():
    result = wgs84_to_gcj02(116.404, 39.915)
    assert isinstance(result, LngLat)
    assert result == (result.lng, result.lat)


def test_precision_is_kept():
    gcj = wgs84_to_gcj02(116.39123456789, 39.90756789012)
    assert len(repr(gcj.lng).split(".")[1]) > 5
    assert len(repr(gcj.lat).split(".")[1]) > 5


# ── gcj02_to_wgs84 ────────────────────────────────────────────────────────────

@pytest.mark.parametrize("name,lng,lat", CITIES)
def test_round_trip_within_two_metres(name, lng, lat):
    gcj = wgs84_to_gcj02(lng, lat)
    back = gcj02_to_wgs84(gcj.lng, gcj.lat)
    assert abs(back.lng - lng) < 2e-5, name
    assert abs(back.lat - lat) < 2e-5, name


def test_round_trip_tiananmen_within_one_metre():
    gcj = wgs84_to_gcj02(116.391, 39.9075)
    back = gcj02_to_wgs84(gcj.lng, gcj.lat)
    assert abs(back.lng - 116.391) < 1e-5
    assert abs(back.lat - 39.9075) < 1e-5


# ── Non-finite input ──────────────────────────────────────────────────────────

@pytest.mark.parametrize("func", [wgs84_to_gcj02, gcj02_to_wgs84])
def test_nan_and_inf_propagate_without_raising(func):
    nan_result = func(math.nan, 30.0)
    assert math.isnan(nan_result.lng)
    assert nan_result.lat == 30.0

    inf_result = func(116.0, math.inf)
    assert inf_result == (116.0, math.inf)


def test_huge_values_are_identity():
    assert wgs84_to_gcj02(1e300, -1e300) == (1e300, -1e300)


# ── batch ─────────────────────────────────────────────────────────────────────

def test_batch_empty():
    assert batch_wgs84_to_gcj02([]) == []


def test_batch_matches_single_point_conversion():
    coords = [(116.391, 39.9075), (121.4995, 31.2415), (113.264, 23.129), (-73.9857, 40.758)]
    result = batch_wgs84_to_gcj02(coords)
    assert len(result) == len(coords)
    for (lng, lat), converted in zip(coords, result):
        assert converted == wgs84_to_gcj02(lng, lat)


def test_batch_handles_many_points():
    coords = [(116 + i * 0.001, 39 + i * 0.001) for i in range(1000)]
    assert len(batch_wgs84_to_gcj02(coords)) == 1000


def test_batch_accepts_generators():
    result = batch_wgs84_to_gcj02((lng, lat) for _, lng, lat in CITIES)
    assert len(result) == len(CITIES)


# ── is_possibly_wgs84 ─────────────────────────────────────────────────────────

def test_heuristic_returns_bool_for_wgs84_point():
    assert isinstance(is_possibly_wgs84(116.391, 39.9075), bool)


def test_heuristic_rejects_gcj02_point():
    gcj = wgs84_to_gcj02(116.391, 39.9075)
    assert is_possibly_wgs84(gcj.lng, gcj.lat) is False


def test_heuristic_is_false_outside_china():
    assert is_possibly_wgs84(-73.9857, 40.7580) is False


def test_heuristic_threshold_can_be_lowered():
    # the round trip drifts by a fraction of a metre, so a zero threshold flags it
    assert is_possibly_wgs84(116.391, 39.9075, threshold_m=0.0) is True


# ── helpers ───────────────────────────────────────────────────────────────────

def test_approximate_offset_zero_for_same_point():
    assert approximate_offset_m(116.4, 39.9, 116.4, 39.9) == 0.0


def test_approximate_offset_one_degree_latitude():
    assert approximate_offset_m(0.0, 0.0, 0.0, 1.0) == pytest.approx(111000.0)
