r"""@package closedcurves.curve.transformed

Curve obtained from another curve by a complex affine map.

Objects of this type are usually not created directly but by using the
arithmetic operators or BaseCurve.translate() / BaseCurve.scale(), e.g.:

```
    c = EllipseCurve(0.3)
    c2 = 1 + 2j * c     # rotate by 90 degrees, scale by 2, shift by 1
```
"""

import numbers

from .basecurve import BaseCurve


__all__ = [
    "TransformedCurve",
]


class TransformedCurve(BaseCurve):
    r"""Curve \f$ w(t) = f\,z(t) + c \f$ for a base curve \f$ z(t) \f$.

    The parameter domain is the one of the base curve. Nested transforms are
    collapsed into a single transform of the innermost curve.
    """

    def __init__(self, curve, factor=1, offset=0, name=''):
        r"""Create a transformed curve.

        @param curve (basecurve.BaseCurve)
            The curve to transform.
        @param factor
            Complex factor to multiply the curve points with.
        @param offset
            Complex offset added after multiplying with `factor`.
        @param name
            Optional name of the new curve. By default, the name of `curve`
            is taken.
        """
        if not isinstance(factor, numbers.Number):
            raise TypeError("Scaling factor must be a scalar number.")
        if not isinstance(offset, numbers.Number):
            raise TypeError("Offset must be a scalar number.")
        if isinstance(curve, TransformedCurve):
            offset = factor * curve.offset + offset
            factor = factor * curve.factor
            curve = curve.curve
        super().__init__(param_length=curve.param_length,
                         name=name or curve.name)
        self._curve = curve
        self._factor = complex(factor)
        self._offset = complex(offset)

    @property
    def curve(self):
        r"""The untransformed curve."""
        return self._curve

    @property
    def factor(self):
        r"""Complex scaling factor."""
        return self._factor

    @property
    def offset(self):
        r"""Complex offset."""
        return self._offset

    def point(self, t):
        return self._factor * self._curve.point(t) + self._offset

    def tangent(self, t):
        return self._factor * self._curve.tangent(t)

    def __repr__(self):
        return "%s(%r, factor=%r, offset=%r)" % (
            type(self).__name__, self._curve, self._factor, self._offset
        )
