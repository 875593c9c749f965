#!/usr/bin/env python3

import unittest
import sys

import numpy as np

from testutils import CurveTestCase
from ..numutils import InvalidArgumentError
from .cornerspline import CornerSplineCurve, shift_to_first_corner
from .cornerspline import TANGENT_MAGNITUDE


SQUARE = [0, 1, 1+1j, 1j]

# a pentagon-like shape with smooth and sharp vertices
PENTA = [0, 1, 1.5+0.6j, 1+1.2j, 0.1+1.1j]


class TestCornerSpline(CurveTestCase):
    def test_square_corner_tangents(self):
        c = CornerSplineCurve(SQUARE, [1, 2, 3, 4])
        np.testing.assert_allclose(c.breaks, [0, 0.25, 0.5, 0.75, 1])
        mu = TANGENT_MAGNITUDE
        expected = mu/2 * np.array([1-1j, 1+1j, -1+1j, -1-1j])
        self.assertComplexClose(c.tangent(c.breaks[:-1]), expected)
        # these are the angle bisectors of the right-angle corners
        directions = expected / np.abs(expected)
        self.assertComplexClose(directions,
                                np.exp(1j*np.pi*np.array([-1, 1, 3, 5])/4))
        # the end of the parameter domain is the first corner again
        self.assertComplexClose(c.tangent(1.0), expected[0])

    def test_square_geometry(self):
        c = CornerSplineCurve(SQUARE, [1, 2, 3, 4])
        np.testing.assert_allclose(c.corner_angles, [0.5] * 4)
        np.testing.assert_allclose(c.arc_params, [0, 0.25, 0.5, 0.75, 1])
        self.assertComplexClose(c.point(c.breaks[:-1]), SQUARE)
        self.assertComplexClose(c.corner_points(), SQUARE)
        self.assertListAlmostEqual(c.corner_params(), [0, 0.25, 0.5, 0.75])
        mu = TANGENT_MAGNITUDE
        self.assertComplexClose(c.corner_tangents[:, 0],
                                mu * np.array([1, 1j, -1, -1j]))
        self.assertComplexClose(c.corner_tangents[:, 1],
                                mu * np.array([-1j, 1, 1j, -1]))
        # the edges are straight
        t = np.linspace(0, 0.25, 11)
        z = c.point(t)
        np.testing.assert_allclose(z.imag, 0, atol=1e-15)
        self.assertTrue(np.all(np.diff(z.real) > 0))

    def test_one_sided_tangents(self):
        c = CornerSplineCurve(SQUARE, [1, 2, 3, 4])
        h = 1e-9
        mu = TANGENT_MAGNITUDE
        self.assertComplexClose(c.tangent(0.25 - h), mu, atol=1e-6)
        self.assertComplexClose(c.tangent(0.25 + h), mu*1j, atol=1e-6)
        self.assertComplexClose(c.tangent(-h), -mu*1j, atol=1e-6)
        self.assertComplexClose(c.tangent(h), mu, atol=1e-6)

    def test_closing_knot_dropped(self):
        c = CornerSplineCurve(SQUARE + [0], [1, 2, 3, 4])
        self.assertEqual(len(c.knots), 4)
        c2 = CornerSplineCurve(SQUARE, [1, 2, 3, 4])
        t = np.linspace(0, 1, 21)
        self.assertComplexClose(c.point(t), c2.point(t), atol=0, rtol=0)

    def test_invalid_corners(self):
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve(SQUARE, [3, 2, 4])
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve(SQUARE, [1, 1, 3])
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve(SQUARE, [5])
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve(SQUARE, [0, 2])
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve(SQUARE, [])
        with self.assertRaises(InvalidArgumentError):
            CornerSplineCurve([0, 1, 1, 1j], [1, 3])

    def test_shift_to_first_corner(self):
        knots = np.array([10, 11, 12, 13, 14])
        corners = np.array([3, 5])
        new_knots, new_corners = shift_to_first_corner(knots, corners)
        np.testing.assert_array_equal(new_knots, [12, 13, 14, 10, 11])
        np.testing.assert_array_equal(new_corners, [1, 3])
        np.testing.assert_array_equal(knots, [10, 11, 12, 13, 14])
        np.testing.assert_array_equal(corners, [3, 5])
        new_knots, new_corners = shift_to_first_corner(knots, [1, 4])
        np.testing.assert_array_equal(new_knots, knots)
        np.testing.assert_array_equal(new_corners, [1, 4])

    def test_relabeled_construction(self):
        c1 = CornerSplineCurve(PENTA, [2, 4])
        self.assertEqual(c1.corners.tolist(), [1, 3])
        self.assertComplexClose(c1.knots[0], PENTA[1], atol=0)
        # same curve, different labels of the same corners
        c2 = CornerSplineCurve(np.roll(PENTA, 1), [3, 5])
        t = np.linspace(-0.5, 1.5, 101)
        self.assertComplexClose(c2.point(t), c1.point(t), atol=1e-14)
        self.assertComplexClose(c2.tangent(t), c1.tangent(t), atol=1e-12)

    def test_other_first_corner(self):
        c1 = CornerSplineCurve(PENTA, [2, 4])
        # start at the corner PENTA[3] instead
        c3 = CornerSplineCurve(np.roll(PENTA, -3), [1, 4])
        self.assertComplexClose(c3.knots[0], PENTA[3], atol=0)
        shift = c1.breaks[1]
        t = np.linspace(0, 1, 57)
        self.assertComplexClose(c3.point(t), c1.point(t + shift), atol=1e-10)
        np.testing.assert_allclose(np.sort(c3.corner_angles),
                                   np.sort(c1.corner_angles), atol=1e-14)

    def test_periodicity(self):
        c = CornerSplineCurve(PENTA, [1, 3])
        t = np.linspace(0, 1, 41)
        for shift in (1, -1, 3):
            self.assertComplexClose(c.point(t + shift), c.point(t),
                                    atol=1e-12)

    def test_interpolation(self):
        c = CornerSplineCurve(PENTA, [1, 3])
        self.assertComplexClose(c.point(c.arc_params[:-1]), PENTA, atol=1e-14)
        self.assertComplexClose(c.point(1.0), PENTA[0], atol=1e-14)
        self.assertTrue(np.all(np.diff(c.arc_params) > 0))
        self.assertEqual(c.arc_params[0], 0.0)
        self.assertEqual(c.arc_params[-1], 1.0)

    def test_tangent_finite_differences(self):
        c = CornerSplineCurve(PENTA, [1, 3])
        # stay clear of the corners
        brks = c.breaks
        t = np.concatenate([
            np.linspace(brks[k] + 0.01, brks[k+1] - 0.01, 7)
            for k in range(len(brks) - 1)
        ])
        h = 1e-6
        fd = (c.point(t+h) - c.point(t-h)) / (2*h)
        self.assertComplexClose(c.tangent(t), fd, atol=1e-6, rtol=0)

    def test_segment_derivatives(self):
        c = CornerSplineCurve(PENTA, [1, 3])
        self.assertEqual(len(c.segments), 2)
        for segment in c.segments:
            a, b = segment.domain
            t = np.linspace(a, b, 15)
            for pp in (segment.x, segment.y):
                np.testing.assert_allclose(pp[1](t), pp[0].derivative()(t),
                                           atol=1e-12)
                np.testing.assert_allclose(pp[2](t), pp[0].derivative(2)(t),
                                           atol=1e-10)

    def test_corner_angles(self):
        # convex corners have interior angles below pi
        c = CornerSplineCurve(PENTA, [1, 2, 3, 4, 5])
        self.assertTrue(np.all(c.corner_angles > 0))
        self.assertTrue(np.all(c.corner_angles < 1))
        # interior angles of a simple pentagon sum up to 3 pi
        self.assertAlmostEqual(c.corner_angles.sum(), 3.0)
        # reflex corner of an L-shape
        L = [0, 2, 2+1j, 1+1j, 1+2j, 2j]
        c = CornerSplineCurve(L, range(1, 7))
        np.testing.assert_allclose(c.corner_angles,
                                   [0.5, 0.5, 0.5, 1.5, 0.5, 0.5])

    def test_single_corner(self):
        c = CornerSplineCurve(PENTA, 3)
        self.assertEqual(c.corners.tolist(), [1])
        np.testing.assert_allclose(c.breaks, [0, 1])
        self.assertComplexClose(c.tangent(0), c.corner_tangent_means()[0])
        self.assertComplexClose(c.point(0), PENTA[2], atol=0)

    def test_tangent_magnitude(self):
        c = CornerSplineCurve(SQUARE, [1, 2, 3, 4], tangent_magnitude=2)
        np.testing.assert_allclose(np.abs(c.corner_tangents), 2)
        self.assertComplexClose(c.tangent(0), 1-1j)

    def test_immutable(self):
        c = CornerSplineCurve(SQUARE, [1, 2, 3, 4])
        with self.assertRaises(ValueError):
            c.knots[0] = 5
        with self.assertRaises(ValueError):
            c.breaks[1] = 0.3
        with self.assertRaises(AttributeError):
            c.knots = SQUARE


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
