r"""@package closedcurves.numutils

Numerical helpers and the exception types used throughout the curve classes.


@b Examples

```
    >>> float(eps(2.0)) == 2 * float(eps(1.0))
    True
    >>> float(wrap(-0.25, 1))
    0.75
```
"""

import numpy as np


__all__ = [
    "InvalidArgumentError",
    "UndefinedOperationError",
    "AccuracyWarning",
    "eps",
    "wrap",
    "as_param_array",
    "as_result",
]


class InvalidArgumentError(ValueError):
    r"""Raised when a curve is constructed from invalid arguments.

    Examples are an out-of-range eccentricity parameter, too many positional
    arguments, or a corner index list that is not strictly increasing.
    """
    pass


class UndefinedOperationError(RuntimeError):
    r"""Raised when an operation is not defined for the curve at hand.

    For example, the exact boundary correspondence of an ellipse is only
    available if the ellipse has been defined via its epsilon parameter.
    """
    pass


class AccuracyWarning(UserWarning):
    r"""Warning issued when a result is computed with reduced accuracy."""
    pass


def eps(x=1.0):
    r"""Distance from `abs(x)` to the next larger floating point number.

    This is always non-negative, in contrast to `numpy.spacing()` which
    returns negative values for negative arguments.
    """
    return np.spacing(np.abs(x))


def wrap(t, period):
    r"""Map any real value (or array of values) into `[0, period)`.

    Values lying an unrepresentably small amount below a multiple of
    `period` would be mapped onto `period` itself by the floating point
    modulo. Those are mapped to zero instead.
    """
    t = np.mod(t, period)
    if np.ndim(t):
        t[t >= period] = 0.0
        return t
    return t.dtype.type(0) if t >= period else t


def as_param_array(t):
    r"""Return a flat float array of parameter values and the original shape."""
    t = np.asarray(t, dtype=float)
    return t.ravel(), t.shape


def as_result(values, shape):
    r"""Reshape flat results to `shape`, returning a scalar for 0-d shapes."""
    values = np.reshape(values, shape)
    if values.ndim == 0:
        return values[()]
    return values
