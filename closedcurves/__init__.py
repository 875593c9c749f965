r"""@package closedcurves

Closed curves in the plane as boundary data for conformal mapping.

The curves in the closedcurves.curve package represent simple closed (Jordan)
curves in the complex plane by their position and tangent as functions of a
periodic parameter. They are meant to be consumed by code constructing
regions, grids or conformal maps, which only relies on the `point(t)` and
`tangent(t)` functions and the parameter length of a curve.

Errors raised by the curves and warnings they issue are defined in
closedcurves.numutils.
"""

from .curve import BaseCurve, EllipseCurve, CornerSplineCurve, TransformedCurve
from .numutils import InvalidArgumentError, UndefinedOperationError
from .numutils import AccuracyWarning
