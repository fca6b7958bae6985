"""
Tests for array operations over many points.
"""

import logging
import math

import numpy as np
import pytest

from gamephysics import Point, batch

POINTS = [
    Point(4, 3),
    Point(-13, -13),
    Point(0, 0),
    Point(-1, 0),
    Point(0.25, -7.5),
    Point(-10, 1),
]


@pytest.fixture
def arr():
    return batch.pack(POINTS)


class TestPacking:

    def test_pack_shape_and_dtype(self, arr):
        assert arr.shape == (len(POINTS), 2)
        assert arr.dtype == np.float32
        assert arr.flags.c_contiguous

    def test_pack_accepts_pairs(self):
        arr = batch.pack([(1, 2), Point(3, 4)])
        assert arr.tolist() == [[1.0, 2.0], [3.0, 4.0]]

    def test_pack_empty(self):
        assert batch.pack([]).shape == (0, 2)

    def test_unpack(self, arr):
        assert batch.unpack(arr) == POINTS

    @pytest.mark.parametrize("bad", [
        np.zeros(4),
        np.zeros((3, 3)),
        np.zeros((2, 2, 2)),
    ])
    def test_rejects_bad_shapes(self, bad):
        with pytest.raises(ValueError):
            batch.magnitudes(bad)

    def test_rejects_bad_origin(self, arr):
        with pytest.raises(ValueError):
            batch.distances(np.zeros(3), arr)

    def test_rejects_bad_out(self, arr):
        with pytest.raises(ValueError):
            batch.magnitudes(arr, out=np.empty(len(POINTS), dtype=np.float64))
        with pytest.raises(ValueError):
            batch.units(arr, out=np.empty((len(POINTS), 3), dtype=np.float32))


class TestMatchesPoint:
    """Each batch function agrees with the Point method of the same meaning."""

    def test_squared(self, arr):
        expected = [float(p.squared()) for p in POINTS]
        assert batch.squared(arr).tolist() == pytest.approx(expected, abs=1e-5)

    def test_magnitudes(self, arr):
        expected = [float(p.abs()) for p in POINTS]
        assert batch.magnitudes(arr).tolist() == pytest.approx(expected, abs=1e-5)

    def test_units(self, arr):
        out = batch.units(arr)
        for row, p in zip(out, POINTS):
            if p == Point(0, 0):
                assert np.isnan(row).all()
                continue
            u = p.unit()
            assert row.tolist() == pytest.approx(list(u.as_tuple()), abs=1e-5)

    def test_distances(self, arr):
        origin = Point(1, -2)
        expected = [float(origin.distance_to(p)) for p in POINTS]
        assert batch.distances(origin, arr).tolist() == pytest.approx(expected, abs=1e-5)

    def test_angles_to(self, arr):
        origin = Point(-1, 0)
        expected = [float(origin.angle_to(p)) for p in POINTS]
        assert batch.angles_to(origin, arr).tolist() == pytest.approx(expected, abs=1e-5)

    def test_movements_to(self, arr):
        origin = np.array([0.0, 0.0])
        out = batch.movements_to(origin, arr)
        for row, p in zip(out, POINTS):
            m = Point(0, 0).movement_to(p)
            assert row.tolist() == pytest.approx(list(m.as_tuple()), abs=1e-5)

    def test_rotated(self, arr):
        out = batch.rotated(arr, math.pi / 2)
        for row, p in zip(out, POINTS):
            r = p.rotated(math.pi / 2)
            assert row.tolist() == pytest.approx(list(r.as_tuple()), abs=1e-5)

    def test_user_angles(self, arr):
        expected = [float(p.user_angle()) for p in POINTS]
        assert batch.user_angles(arr).tolist() == pytest.approx(expected, abs=1e-4)


class TestBuffers:

    def test_units_logs_zero_rows(self, arr, caplog):
        with caplog.at_level(logging.DEBUG, logger="gamephysics"):
            batch.units(arr)
        assert "1 zero vectors out of 6" in caplog.text

    def test_units_without_zero_rows_is_silent(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="gamephysics"):
            batch.units(batch.pack([Point(3, 4)]))
        assert "zero vectors" not in caplog.text

    def test_inputs_are_not_modified(self, arr):
        before = arr.copy()
        batch.units(arr)
        batch.rotated(arr, 1.0)
        np.testing.assert_array_equal(arr, before)

    def test_out_buffer_is_filled_and_returned(self, arr):
        out = np.zeros(len(POINTS), dtype=np.float32)
        result = batch.magnitudes(arr, out=out)
        assert result is out
        assert out[0] == 5.0

    def test_empty_input(self):
        empty = batch.pack([])
        assert batch.user_angles(empty).shape == (0,)
        assert batch.movements_to(Point(0, 0), empty).shape == (0, 2)
