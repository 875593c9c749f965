r"""@package closedcurves.curve.ellipse

Parameterized ellipse with the exact boundary correspondence of its
conformal map onto the unit disk.

The ellipse with semi-axes `a`, `b` and rotation angle `r` is given by
\f[
    z(t) = e^{ir} \big( a \cos(2\pi t) + i\, b \sin(2\pi t) \big),
    \qquad t \in [0, 1).
\f]
If it is defined via a single parameter \f$ \varepsilon \in [0,1) \f$, we
have \f$ a = 1 + \varepsilon \f$ and \f$ b = 1 - \varepsilon \f$. Only in
this case is theta_exact() available.


@b Examples

```
    c = EllipseCurve(0.3)        # a = 1.3, b = 0.7
    t = np.linspace(0, 1, 9)
    c.point(t)
    c.theta_exact(t)             # angles on the unit circle

    c = EllipseCurve(2, 1, np.pi/4)  # rotated ellipse, no epsilon
```

@b References

\anchor henrici1986 [1] Henrici, Peter. "Applied and Computational Complex
    Analysis, Vol. 3." Wiley (1986), p. 391.
"""

import logging
import warnings

import numpy as np
from mpmath import mp

from ..numutils import InvalidArgumentError, UndefinedOperationError
from ..numutils import AccuracyWarning, eps, as_param_array, as_result
from .basecurve import BaseCurve


__all__ = [
    "EllipseCurve",
]


logger = logging.getLogger(__name__)


## Number of consecutive series terms added per convergence check.
SERIES_BATCH_SIZE = 20

## Maximum number of batches evaluated in theta_exact().
SERIES_MAX_BATCHES = 60

## Epsilon above which theta_exact() is known to lose accuracy.
ACCURACY_LIMIT = 0.95


def _term_magnitude(m, e):
    r"""Magnitude of the m'th correspondence series term (without the sine)."""
    return e**m / (1 + e**(2*m)) / m


class EllipseCurve(BaseCurve):
    r"""Ellipse in the complex plane, optionally rotated.

    The curve can be constructed in the following ways:
        * ``EllipseCurve()``: the unit circle
        * ``EllipseCurve(e)``: `a = 1+e` and `b = 1-e` for `0 <= e < 1`
        * ``EllipseCurve(a, b)`` or ``EllipseCurve(a, b, r)``: semi-axes
          `a` and `b` and rotation angle `r` (in radians)

    In the latter case, `epsilon` is still defined if ``a + b == 2`` up to
    rounding errors.
    """

    def __init__(self, *args, name=''):
        r"""Create an ellipse.

        @param *args
            Either nothing, the epsilon parameter, or the semi-axes `a`, `b`
            followed by an optional rotation angle `r`. See the class
            documentation.
        @param name
            Name of this curve.

        @b Raises

        `InvalidArgumentError` for more than three arguments or an epsilon
        outside `[0, 1)`.
        """
        super().__init__(param_length=1, name=name)
        a, b, r, epsilon = 1.0, 1.0, 0.0, 0.0
        if len(args) > 3:
            raise InvalidArgumentError("Too many arguments.")
        if len(args) == 1:
            epsilon = args[0]
            if not 0 <= epsilon < 1:
                raise InvalidArgumentError(
                    "Single argument must satisfy 0 <= epsilon < 1."
                )
            a = 1 + epsilon
            b = 1 - epsilon
        elif len(args) >= 2:
            a, b = args[:2]
            epsilon = None
            if abs(a + b - 2) < 10*eps(2.0) and 0 <= a - 1 < 1:
                epsilon = a - 1
            if len(args) > 2:
                r = args[2]
        self._a = float(a)
        self._b = float(b)
        self._r = float(r)
        self._epsilon = None if epsilon is None else float(epsilon)

    @classmethod
    def from_epsilon(cls, epsilon, name=''):
        r"""Create the ellipse with semi-axes `1+epsilon` and `1-epsilon`."""
        return cls(epsilon, name=name)

    @property
    def a(self):
        r"""Major semi-axis."""
        return self._a

    @property
    def b(self):
        r"""Minor semi-axis."""
        return self._b

    @property
    def r(self):
        r"""Rotation angle in radians."""
        return self._r

    @property
    def epsilon(self):
        r"""Shape parameter with `a = 1+epsilon`, `b = 1-epsilon` (or `None`)."""
        return self._epsilon

    def point(self, t):
        return self._evaluate(self._point, t)

    def tangent(self, t):
        return self._evaluate(self._tangent, t)

    def _point(self, t):
        th = 2*np.pi * t
        z = self._a * np.cos(th) + 1j * self._b * np.sin(th)
        if self._r:
            z = z * np.exp(1j * self._r)
        return z

    def _tangent(self, t):
        th = 2*np.pi * t
        zt = (-self._a * np.sin(th) + 1j * self._b * np.cos(th)) * 2*np.pi
        if self._r:
            zt = zt * np.exp(1j * self._r)
        return zt

    def theta_exact(self, t, use_mp=False, dps=None):
        r"""Boundary correspondence of the conformal map onto the unit disk.

        For each parameter value `t`, this returns the angle \f$\theta\f$
        such that the conformal map of the interior of the ellipse onto the
        unit disk (fixing the origin and the positive real direction) maps
        `point(t)` to \f$ e^{i\theta} \f$. The result is computed by summing
        the series (see \ref henrici1986 "[1]")
        \f[
            \theta(s) = s + 2 \sum_{m=1}^\infty (-1)^m
                \frac{\varepsilon^m}{m (1 + \varepsilon^{2m})} \sin(2ms),
            \qquad s = 2\pi t,
        \f]
        in batches of `SERIES_BATCH_SIZE` terms until the terms no longer
        change the result (at most `SERIES_MAX_BATCHES` batches). This is
        accurate to machine precision for `epsilon` up to about `0.95`.

        @param t
            Parameter value(s). Values outside `[0, 1)` are normalized first.
        @param use_mp
            Whether to sum the series using `mpmath` arbitrary precision
            arithmetic. The results are converted back to floats. Default is
            `False`.
        @param dps
            Decimal places to use in case ``use_mp==True``. Default is the
            current global `mpmath` setting.

        @return Angles with the same shape as `t`.

        @b Raises

        `UndefinedOperationError` if this ellipse has no `epsilon` parameter.
        An `AccuracyWarning` is issued for ``epsilon > 0.95``.
        """
        if self._epsilon is None:
            raise UndefinedOperationError(
                "Must define curve with eccentricity parameter."
            )
        if self._epsilon > ACCURACY_LIMIT:
            warnings.warn(
                "Boundary correspondence is not accurate for epsilon > %s."
                % ACCURACY_LIMIT,
                AccuracyWarning, stacklevel=2,
            )
        t, shape = as_param_array(t)
        s = 2*np.pi * self.normalize(t)
        if use_mp:
            with mp.workdps(dps or mp.dps):
                th = np.array([float(self._theta_mp(x)) for x in s])
        else:
            th = self._theta_fp(s)
        return as_result(th, shape)

    def _theta_fp(self, s):
        r"""Sum the correspondence series for all `s` simultaneously."""
        e = self._epsilon
        th = s.copy()
        for k in range(SERIES_MAX_BATCHES):
            m = k * SERIES_BATCH_SIZE + np.arange(1, SERIES_BATCH_SIZE+1)
            terms = (-1.0)**m * _term_magnitude(m, e) * np.sin(2*np.outer(s, m))
            th += 2 * terms.sum(axis=1)
            if np.all(_term_magnitude(m[-1], e) < eps(th)):
                break
        logger.debug("theta_exact: used %d term batches for epsilon=%s",
                     k+1, e)
        return th

    def _theta_mp(self, s):
        r"""Sum the correspondence series for a single `s` using mpmath."""
        e = mp.mpf(self._epsilon)
        s = mp.mpf(s)
        th = s
        for k in range(SERIES_MAX_BATCHES):
            m_max = (k+1) * SERIES_BATCH_SIZE
            for m in range(k * SERIES_BATCH_SIZE + 1, m_max + 1):
                th += 2 * (-1)**m * _term_magnitude(m, e) * mp.sin(2*m*s)
            if _term_magnitude(m_max, e) <= mp.eps * abs(th):
                break
        return th

    def __repr__(self):
        return "%s(%r, %r, %r)" % (type(self).__name__, self._a, self._b,
                                   self._r)

    def __str__(self):
        lines = [
            "parameterized ellipse:",
            "    major axis   %f" % self._a,
            "    minor axis   %f" % self._b,
            "    eccentricity %f" % (self._a / self._b),
        ]
        if self._epsilon is not None:
            lines.append("    epsilon      %f" % self._epsilon)
        return "\n".join(lines)
