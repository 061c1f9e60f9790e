"""Tests for Poisson disc sampling."""

import logging

import numpy as np
import pytest
from scipy.spatial.distance import pdist

from py_prelude.config import settings
from py_prelude.core import InvalidArgumentError, SeededRNG, poisson_disc_sample
from py_prelude.core.poisson_disc import PoissonDiscConfig, build_config


def assert_min_spacing(points, radius):
    if len(points) > 1:
        assert pdist(points).min() >= radius - 1e-9


def assert_in_bounds(points, width, height):
    assert np.all(points[:, 0] >= 0)
    assert np.all(points[:, 0] < width)
    assert np.all(points[:, 1] >= 0)
    assert np.all(points[:, 1] < height)


class TestPoissonDisc:
    """Test Bridson sampling on a fixed seed."""

    @pytest.fixture
    def points(self):
        return SeededRNG(42).poisson_disc(100, 100, 10)

    def test_reference_output(self, points):
        assert points.shape == (64, 2)
        assert points[0, 0] == 60.11037519201636
        assert points[0, 1] == 44.82905589975417
        np.testing.assert_allclose(
            points[1:3],
            [[54.43347039294331, 34.54355534942016],
             [64.20297102214188, 23.528628725511503]],
            rtol=1e-12,
        )

    def test_point_bounds(self, points):
        assert_in_bounds(points, 100, 100)

    def test_minimum_distance(self, points):
        assert_min_spacing(points, 10)

    def test_reproducible(self, points):
        np.testing.assert_array_equal(points, SeededRNG(42).poisson_disc(100, 100, 10))

    def test_different_seeds(self):
        points1 = SeededRNG(1).poisson_disc(50, 50, 5)
        points2 = SeededRNG(2).poisson_disc(50, 50, 5)
        assert points1.shape != points2.shape or not np.array_equal(points1, points2)

    def test_larger_radius_fewer_points(self, points):
        sparse = SeededRNG(42).poisson_disc(100, 100, 20)
        assert len(sparse) == 19
        assert len(sparse) <= len(points)
        assert_min_spacing(sparse, 20)

    def test_larger_area_more_points(self, points):
        wide = SeededRNG(42).poisson_disc(200, 200, 10)
        assert len(wide) == 261
        assert len(wide) >= len(points)
        assert_in_bounds(wide, 200, 200)
        assert_min_spacing(wide, 10)

    def test_non_square_area(self):
        points = SeededRNG(11).poisson_disc(120, 30, 6)
        assert_in_bounds(points, 120, 30)
        assert_min_spacing(points, 6)
        assert points[:, 0].max() > 90

    def test_area_smaller_than_radius(self):
        points = SeededRNG(42).poisson_disc(1, 1, 10)
        assert points.shape == (1, 2)

    def test_custom_attempts(self):
        points = SeededRNG(7).poisson_disc(50, 20, 5, k=5)
        assert len(points) == 23
        assert_min_spacing(points, 5)

    def test_default_attempts_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "poisson_disc_attempts", 5)
        np.testing.assert_array_equal(
            SeededRNG(7).poisson_disc(50, 20, 5),
            SeededRNG(7).poisson_disc(50, 20, 5, k=5),
        )

    def test_fills_area(self):
        """Test that no gap large enough for another point remains."""
        points = SeededRNG(5).poisson_disc(60, 60, 6)
        xs, ys = np.meshgrid(np.arange(3, 57, 1.0), np.arange(3, 57, 1.0))
        probes = np.column_stack([xs.ravel(), ys.ravel()])
        nearest = np.min(np.linalg.norm(probes[:, None, :] - points[None, :, :], axis=2), axis=1)
        assert nearest.max() < 2 * 6

    def test_accepts_any_generator(self):
        """Test that the sampler only relies on uniform() and uniform_int()."""
        rng = SeededRNG(42)
        points = poisson_disc_sample(rng, 100, 100, 10, 30)
        np.testing.assert_array_equal(points, SeededRNG(42).poisson_disc(100, 100, 10, 30))

    def test_logs_summary(self, caplog):
        caplog.set_level(logging.DEBUG, logger="py_prelude")
        SeededRNG(42).poisson_disc(100, 100, 10)
        assert "Poisson disc sampling placed 64 points" in caplog.text


class TestPoissonDiscValidation:
    """Test rejection of degenerate parameters."""

    @pytest.mark.parametrize("width, height, radius, k", [
        (0, 100, 10, 30),
        (100, -1, 10, 30),
        (100, 100, 0, 30),
        (100, 100, -5, 30),
        (100, 100, 10, 0),
        (100, 100, 10, -3),
        (100, 100, 10, 2.5),
        (float("inf"), 100, 10, 30),
        (100, 100, float("nan"), 30),
        (100, 100, 10, True),
        ("100", 100, 10, 30),
        (100, True, 10, 30),
        (1e308, 1, 1e-3, 30),
        (1, 1, 1e-320, 30),
        (10**400, 100, 10, 30),
    ])
    def test_invalid_parameters(self, width, height, radius, k):
        rng = SeededRNG(42)
        with pytest.raises(InvalidArgumentError):
            rng.poisson_disc(width, height, radius, k)
        assert rng.draws == 0

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            SeededRNG(42).poisson_disc(100, 100, 0)

    def test_grid_limit(self, monkeypatch):
        monkeypatch.setattr(settings, "max_grid_cells", 100)
        with pytest.raises(InvalidArgumentError, match="exceeds the limit"):
            SeededRNG(42).poisson_disc(100, 100, 1)

    def test_config_grid_shape(self):
        config = build_config(100, 50, 10, 30)
        assert isinstance(config, PoissonDiscConfig)
        assert config.grid_shape == (8, 15)
        assert config.cell_size == pytest.approx(10 / np.sqrt(2))

    @pytest.mark.parametrize("width, height, radius", [
        (1e308, 1, 1e-3),
        (1, 1e308, 1e-3),
        (1, 1, 1e-320),
    ])
    def test_grid_ratio_overflow(self, width, height, radius):
        with pytest.raises(InvalidArgumentError, match="exceeds the limit"):
            SeededRNG(42).poisson_disc(width, height, radius)

    def test_numpy_scalars_accepted(self):
        points = SeededRNG(42).poisson_disc(np.float64(100), np.int64(100), 10, np.int64(30))
        assert len(points) == 64
