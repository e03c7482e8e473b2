"""
Unit tests for geo_utils module
"""
import pytest

from src.realestate_directory.utils.geo_utils import EARTH_RADIUS_KM, haversine_km


class TestHaversine:
    """Tests for haversine_km"""

    def test_same_point_is_zero(self):
        """Test distance from a point to itself"""
        assert haversine_km(-33.8688, 151.2093, -33.8688, 151.2093) == 0

    def test_sydney_to_parramatta(self):
        """Test a short suburban distance"""
        distance = haversine_km(-33.8688, 151.2093, -33.815, 151.0011)
        assert 19 < distance < 21

    def test_sydney_to_melbourne(self):
        """Test an interstate distance"""
        distance = haversine_km(-33.8688, 151.2093, -37.8136, 144.9631)
        assert 700 < distance < 720

    def test_symmetric(self):
        """Test distance does not depend on direction"""
        there = haversine_km(-27.4698, 153.0251, -31.9523, 115.8613)
        back = haversine_km(-31.9523, 115.8613, -27.4698, 153.0251)
        assert there == pytest.approx(back)

    def test_custom_radius_scales_distance(self):
        """Test the sphere radius is a linear factor"""
        default = haversine_km(-33.8688, 151.2093, -37.8136, 144.9631)
        doubled = haversine_km(-33.8688, 151.2093, -37.8136, 144.9631,
                               earth_radius_km=EARTH_RADIUS_KM * 2)
        assert doubled == pytest.approx(default * 2)
