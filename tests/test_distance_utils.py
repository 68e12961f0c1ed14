from __future__ import annotations

import math

import numpy as np
import pytest

from safe_walk_routing.data.distance_utils import (
    EARTH_RADIUS_M,
    haversine_distance,
    haversine_distances,
)


def test_one_degree_of_latitude() -> None:
    assert haversine_distance(0.0, 0.0, 1.0, 0.0) == pytest.approx(111_195.0, abs=1.0)
    assert haversine_distance(10.0, 20.0, 10.0, 20.0) == 0.0


def test_antipodal_points_do_not_overflow_asin() -> None:
    assert haversine_distance(0.0, 0.0, 0.0, 180.0) == pytest.approx(math.pi * EARTH_RADIUS_M)
    assert haversine_distance(90.0, 0.0, -90.0, 0.0) == pytest.approx(math.pi * EARTH_RADIUS_M)


def test_vectorized_form_agrees_with_scalar_form() -> None:
    lats = np.array([0.0, 0.001, 51.5, -33.9, 0.0])
    lons = np.array([0.0, 0.001, -0.12, 151.2, 180.0])

    distances = haversine_distances(0.0, 0.0, lats, lons)

    expected = [haversine_distance(0.0, 0.0, lat, lon) for lat, lon in zip(lats, lons)]
    assert distances.tolist() == pytest.approx(expected)

