r"""@package closedcurves.curve

Parameterized simple closed curves in the complex plane.

All curves derive from basecurve.BaseCurve and provide the `point(t)` and
`tangent(t)` functions on the periodic parameter domain `[0, L)`. The
available curve types are:
    * ellipse.EllipseCurve: an analytic (possibly rotated) ellipse, which
      knows the exact boundary correspondence of its conformal map onto the
      unit disk
    * cornerspline.CornerSplineCurve: a closed piecewise cubic spline through
      a set of knots, with designated corners
    * transformed.TransformedCurve: a translated and/or scaled curve, usually
      created via the arithmetic operators


@b Examples

```
    ellipse = EllipseCurve(0.2)
    square = CornerSplineCurve([0, 1, 1+1j, 1j], [1, 2, 3, 4])
    centered = square - (0.5 + 0.5j)

    t = np.linspace(0, 1, 100)
    for c in (ellipse, square, centered):
        z, zt = c.point(t), c.tangent(t)
```
"""

from .basecurve import BaseCurve
from .ellipse import EllipseCurve
from .cornerspline import CornerSplineCurve
from .transformed import TransformedCurve
