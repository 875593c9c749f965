r"""@package closedcurves.curve.cornerspline

Periodic piecewise cubic spline through a set of knots with corners.

The curve interpolates a closed sequence of complex knots. A subset of the
knots, given by (1-based) indices in the `corners` array, are *corners*, i.e.
points at which the tangent may be discontinuous. Between two consecutive
corners, the real and imaginary parts are each interpolated by a cubic spline
whose end slopes are fixed to the corner tangents. The knots are
parameterized by their normalized cumulative chordal distance, which roughly
approximates an arc length parameterization on `[0, 1)`.

The corner interior angles and tangent directions are determined solely by
the neighboring knots, i.e. by pretending the knots are the vertices of a
polygon. The tangent at a corner has two one-sided values. The tangent()
method returns their mean at the corner parameters themselves.

This class is mainly used for testing corner cases of boundaries that are
not polygons.


@b Examples

```
    # A "rounded" square with two sharp corners.
    knots = [0, 0.5-0.1j, 1, 1.1+0.5j, 1+1j, 0.5+1.1j, 1j, -0.1+0.5j]
    c = CornerSplineCurve(knots, [1, 5])
    c.corner_angles     # interior angles in units of pi
    z = c(np.linspace(0, 1, 400))
```
"""

import logging

import numpy as np
from scipy.interpolate import CubicSpline, PPoly

from ..numutils import InvalidArgumentError, eps
from ..utils import isiterable
from .basecurve import BaseCurve


__all__ = [
    "CornerSplineCurve",
    "SplineSegment",
    "shift_to_first_corner",
    "TANGENT_MAGNITUDE",
    "CORNER_TOLERANCE",
]


logger = logging.getLogger(__name__)


## Magnitude of the corner tangents used as spline end slopes.
#
# This value is arbitrary. It has been chosen since it results in a natural
# distribution of points on the curve for evenly spaced parameter values.
# Changing it changes the shape of the curve.
TANGENT_MAGNITUDE = 5

## Parameters closer than this to a corner parameter get the mean corner tangent.
CORNER_TOLERANCE = 10 * eps(1.0)


def shift_to_first_corner(knots, corners):
    r"""Cyclically relabel knots such that the first corner is knot `1`.

    @param knots
        Array of `n` knots.
    @param corners
        Strictly increasing array of 1-based corner indices into `knots`.

    @return A pair ``(knots, corners)`` of new arrays. The knot previously at
        index ``corners[0]`` is now the first knot and the corner indices are
        shifted accordingly, so that the returned `corners` starts with `1`.
        The original arrays are not modified.
    """
    knots = np.asarray(knots)
    corners = np.asarray(corners, dtype=int)
    n = len(knots)
    shift = corners[0] - 1
    index_map = (np.arange(n) + shift) % n
    return knots[index_map], corners - shift


def _ppderivs(pp):
    r"""First and second derivatives of the cubic piecewise polynomial `pp`.

    The derivatives are constructed by differentiating the local polynomial
    coefficients, i.e. no refitting takes place.
    """
    c = pp.c
    first = PPoly(np.array([3*c[0], 2*c[1], c[2]]), pp.x, extrapolate=True)
    second = PPoly(np.array([6*c[0], 2*c[1]]), pp.x, extrapolate=True)
    return first, second


class SplineSegment():
    r"""Spline representation of the curve between two consecutive corners.

    Stores the piecewise polynomials of the real (`x`) and imaginary (`y`)
    parts together with their first and second derivatives.
    """

    def __init__(self, params, values, start_slope, end_slope):
        r"""Fit the segment.

        @param params
            Increasing parameter values of the knots in this segment
            (including both corners).
        @param values
            Complex knot values at `params`.
        @param start_slope,end_slope
            Complex derivatives at the first and last knot.
        """
        params = np.asarray(params, dtype=float)
        values = np.asarray(values, dtype=complex)
        ## Parameter interval `[start, end]` covered by this segment.
        self.domain = (params[0], params[-1])
        self._x = self._fit(params, values.real, start_slope.real,
                            end_slope.real)
        self._y = self._fit(params, values.imag, start_slope.imag,
                            end_slope.imag)

    @staticmethod
    def _fit(params, values, start_slope, end_slope):
        pp = CubicSpline(params, values,
                         bc_type=((1, start_slope), (1, end_slope)),
                         extrapolate=True)
        return (pp,) + _ppderivs(pp)

    @property
    def x(self):
        r"""Real part polynomials `(value, first, second derivative)`."""
        return self._x

    @property
    def y(self):
        r"""Imaginary part polynomials `(value, first, second derivative)`."""
        return self._y

    def __call__(self, t, diff=0):
        r"""Evaluate the segment (or a derivative) at parameter(s) `t`."""
        return self._x[diff](t) + 1j * self._y[diff](t)


class CornerSplineCurve(BaseCurve):
    r"""Closed piecewise cubic spline curve with corners.

    All derived data (parameterization, corner angles and tangents, segment
    splines) is computed upon construction. The curve cannot be modified
    afterwards.

    See the package documentation of curve.cornerspline for an example.
    """

    def __init__(self, knots, corners, tangent_magnitude=TANGENT_MAGNITUDE,
                 name=''):
        r"""Create a spline curve with corners.

        @param knots
            Sequence of complex knots. If the last knot equals the first, it
            is dropped, since the curve is closed implicitly.
        @param corners
            Strictly increasing sequence of 1-based indices into `knots`
            marking the corners. If ``corners[0] != 1``, the knots are
            cyclically relabeled such that the first corner becomes the
            first knot (and hence lies at parameter `0`).
        @param tangent_magnitude
            Magnitude of the corner tangents, which serve as end slopes for
            the splines between corners. Default is `TANGENT_MAGNITUDE`.
        @param name
            Name of this curve.

        @b Raises

        `InvalidArgumentError` if `corners` is not strictly increasing or
        contains invalid indices.
        """
        super().__init__(param_length=1, name=name)
        knots = np.asarray(knots, dtype=complex).ravel()
        if not isiterable(corners):
            corners = [corners]
        corners = np.asarray(corners).ravel()
        if len(knots) > 1 and knots[0] == knots[-1]:
            knots = knots[:-1]
        if np.any(np.diff(corners) <= 0):
            raise InvalidArgumentError(
                "The corners array must be strictly increasing."
            )
        if (len(corners) == 0
                or np.any(corners != np.round(corners))
                or corners[0] < 1 or corners[-1] > len(knots)):
            raise InvalidArgumentError(
                "The corners array must be a valid set of indices for knots."
            )
        if len(knots) < 2:
            raise InvalidArgumentError("At least two distinct knots required.")
        knots, corners = shift_to_first_corner(knots, corners.astype(int))
        self._tangent_magnitude = tangent_magnitude
        self._build(knots, corners)
        logger.debug(
            "Created corner spline with %d knots and %d corners/segments.",
            len(self._knots), len(self._corners)
        )

    def _build(self, knots, corners):
        r"""Compute all derived data from the (shifted) knots and corners."""
        n = len(knots)
        # closed polygon, i.e. v[n] == v[0]
        v = np.append(knots, knots[0])
        chords = np.abs(np.diff(v))
        if np.any(chords == 0):
            raise InvalidArgumentError("Consecutive knots must be distinct.")
        t = np.concatenate([[0.0], np.cumsum(chords)])
        t /= t[-1]

        # 0-based indices of each corner and its polygon neighbors
        cv = corners - 1
        pv = (cv - 1) % n
        fv = (cv + 1) % n
        alpha = np.mod(np.angle((v[pv] - v[cv]) / (v[fv] - v[cv])) / np.pi, 2)

        # columns: outgoing, incoming
        vtan = np.column_stack([v[fv] - v[cv], v[cv] - v[pv]])
        vtan = self._tangent_magnitude * vtan / np.abs(vtan)

        ncv = len(cv)
        segments = []
        for k in range(ncv):
            end = cv[k+1] if k + 1 < ncv else n
            vdx = np.arange(cv[k], end + 1)
            segments.append(SplineSegment(
                t[vdx], v[vdx], vtan[k, 0], vtan[(k+1) % ncv, 1]
            ))

        self._knots = self._readonly(knots)
        self._corners = self._readonly(corners)
        self._arc_params = self._readonly(t)
        self._corner_angles = self._readonly(alpha)
        self._corner_tangents = self._readonly(vtan)
        self._breaks = self._readonly(np.append(t[cv], 1.0))
        self._segments = tuple(segments)

    @staticmethod
    def _readonly(arr):
        arr = np.array(arr)
        arr.setflags(write=False)
        return arr

    @property
    def knots(self):
        r"""Knots of the curve (relabeled to start at the first corner)."""
        return self._knots

    @property
    def corners(self):
        r"""1-based corner indices into knots (the first one is always `1`)."""
        return self._corners

    @property
    def arc_params(self):
        r"""Parameter values of the knots, including the closing knot at `1`."""
        return self._arc_params

    @property
    def corner_angles(self):
        r"""Interior angles at the corners in units of pi, in `[0, 2)`."""
        return self._corner_angles

    @property
    def corner_tangents(self):
        r"""Corner tangents, shape `(num_corners, 2)`: outgoing, incoming."""
        return self._corner_tangents

    @property
    def tangent_magnitude(self):
        r"""Magnitude of the corner tangents."""
        return self._tangent_magnitude

    @property
    def breaks(self):
        r"""Parameters of the corners followed by a trailing `1.0`."""
        return self._breaks

    @property
    def segments(self):
        r"""Tuple of SplineSegment objects, one per corner."""
        return self._segments

    def corner_params(self):
        r"""Parameter values of the corners."""
        return self._breaks[:-1].copy()

    def corner_points(self):
        r"""Positions of the corners."""
        return self._knots[self._corners - 1].copy()

    def corner_tangent_means(self):
        r"""Mean of the outgoing and incoming tangent at each corner."""
        return self._corner_tangents.sum(axis=1) / 2

    def point(self, t):
        return self._evaluate(lambda t: self._param_eval(t, 0), t)

    def tangent(self, t):
        r"""Tangent at parameter(s) `t`.

        At the corners, the mean of the incoming and outgoing tangent is
        returned. This is a convention; geometrically, the tangent is
        undefined there.
        """
        return self._evaluate(self._tangent_eval, t)

    def _tangent_eval(self, t):
        zt = self._param_eval(t, 1)
        cavg = self.corner_tangent_means()
        for k, ct in enumerate(self._breaks[:-1]):
            zt[np.abs(t - ct) < CORNER_TOLERANCE] = cavg[k]
        # t close to 1 is close to the first corner at 0
        zt[np.abs(t - 1.0) < CORNER_TOLERANCE] = cavg[0]
        return zt

    def _param_eval(self, t, diff):
        r"""Evaluate normalized flat parameters using derivative order `diff`."""
        z = np.full(t.shape, np.nan, dtype=complex)
        brks = self._breaks
        for k, segment in enumerate(self._segments):
            mask = (brks[k] <= t) & (t < brks[k+1])
            z[mask] = segment(t[mask], diff=diff)
        return z

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self._knots.tolist(),
                               self._corners.tolist())
