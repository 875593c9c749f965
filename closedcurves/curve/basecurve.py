r"""@package closedcurves.curve.basecurve

Base class for parameterized simple closed curves in the complex plane.

A curve maps a parameter `t` of the domain `[0, L)` to a point
\f$ z(t) \in \mathbb{C} \f$. Here, `L` is the *parameter length* of the
curve, which is `1` unless a subclass states otherwise. Points and tangents
are periodic in `t` with period `L`, so any real parameter value may be
supplied and will be normalized via normalize() first.

@b Examples

```
    curve = EllipseCurve(2.0, 1.0)
    z = curve(np.linspace(0, 1, 200))  # same as curve.point(...)

    # Recentring and scaling produce new curves with the same interface.
    shifted = 0.5j + 2 * curve
    shifted.tangent(0.25)
```
"""

from abc import ABCMeta, abstractmethod
import numbers

import numpy as np

from ..numutils import wrap, as_param_array, as_result
from ..utils import save_to_file, load_from_file


__all__ = [
    "BaseCurve",
]


class BaseCurve(metaclass=ABCMeta):
    r"""Base class for closed curves in the complex plane.

    Subclasses need to implement the following functions:
        * point() returning the complex position on the curve
        * tangent() returning the complex derivative of point() w.r.t. the
          curve parameter

    Both have to accept scalar parameters as well as arrays of parameters
    (evaluated elementwise) and should normalize the parameters using
    normalize() before evaluation.

    Note: Tangent vectors are not normalized.
    """

    # Make NumPy scalars defer to our reflected operators (e.g. in
    # `np.float64(2) * curve`).
    __array_ufunc__ = None

    def __init__(self, param_length=1, name=''):
        r"""Baseclass init for curves.

        @param param_length
            Length `L` of the parameter domain `[0, L)`. Default is `1`.
        @param name
            Name of this curve. This may be used when printing information
            about this curve.
        """
        self._param_length = param_length
        self._name = name

    @property
    def param_length(self):
        r"""Length of the (periodic) parameter domain."""
        return self._param_length

    @property
    def name(self):
        r"""Name of this curve."""
        return self._name
    @name.setter
    def name(self, value):
        self._name = value

    def normalize(self, t):
        r"""Map parameter value(s) into `[0, L)`, where `L` is the parameter length."""
        return wrap(t, self._param_length)

    @abstractmethod
    def point(self, t):
        r"""Complex position of the curve at parameter(s) `t`."""
        pass

    @abstractmethod
    def tangent(self, t):
        r"""Complex tangent (derivative w.r.t. `t`) at parameter(s) `t`."""
        pass

    def __call__(self, t):
        r"""Evaluate the curve, i.e. return point()."""
        return self.point(t)

    def xypoint(self, t):
        r"""Return points as real `(x, y)` pairs.

        The result has shape ``t.shape + (2,)``.
        """
        z = np.asarray(self.point(t))
        return np.stack([z.real, z.imag], axis=-1)

    def _evaluate(self, func, t):
        r"""Apply `func` to the normalized flat parameters and restore the shape.

        This is a convenience for subclasses whose evaluation functions work
        on 1-D arrays.
        """
        t, shape = as_param_array(t)
        return as_result(func(self.normalize(t)), shape)

    def translate(self, offset):
        r"""Return a new curve shifted by the complex `offset`."""
        from .transformed import TransformedCurve
        return TransformedCurve(self, offset=offset)

    def scale(self, factor):
        r"""Return a new curve multiplied by the complex `factor`.

        Scaling is done w.r.t. the origin, i.e. a complex factor rotates the
        curve around zero in addition to stretching it.
        """
        from .transformed import TransformedCurve
        return TransformedCurve(self, factor=factor)

    def __add__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.translate(other)

    __radd__ = __add__

    def __sub__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.translate(-other)

    def __rsub__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return (-self).translate(other)

    def __mul__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self.scale(1.0 / other)

    def __neg__(self):
        return self.scale(-1)

    def save(self, filename, overwrite=False, verbose=True, msg=''):
        r"""Save the curve to disk.

        @param filename
            The file to store the data in. The extension ``'.npy'`` will be
            added if not already there.
        @param overwrite
            Whether to overwrite an existing file with the same name. If
            `False` (default) and such a file exists, a `RuntimeError` is
            raised.
        @param verbose
            Whether to print a message upon success.
        @param msg
            Optional additional text shown upon successful save in case
            `verbose==True`.
        """
        if msg:
            msg = ' "%s"' % msg
        return save_to_file(
            filename, self, overwrite=overwrite, verbose=verbose,
            showname='curve%s' % msg
        )

    @staticmethod
    def load(filename):
        r"""Static function to load a curve object from disk."""
        return load_from_file(filename)
