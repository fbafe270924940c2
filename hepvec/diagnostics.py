# hepvec/diagnostics.py
"""
Advisory diagnostics for degenerate vector operations.

Nothing in ``hepvec`` raises on numeric degeneracy; instead each anomalous
branch issues a warning of a specific category and carries on with a
well-defined fallback. Callers decide what happens to them with the usual
``warnings`` filters, e.g.::

    import warnings
    from hepvec.diagnostics import VectorWarning

    warnings.simplefilter("error", VectorWarning)   # strict mode
    warnings.simplefilter("ignore", VectorWarning)  # silent mode
"""

import warnings


class VectorWarning(UserWarning):
    """Base category for every ``hepvec`` diagnostic."""


class BadIndexWarning(VectorWarning):
    """Component index outside {0, 1, 2}."""


class ZeroVectorWarning(VectorWarning):
    """Operation needs a direction but the vector (or axis) is zero."""


class AxisAlignedWarning(VectorWarning):
    """Vector lies on the Z axis, so its azimuth is undefined."""


class AngleRangeWarning(VectorWarning):
    """Polar angle outside [0, pi]; the value is still used."""


class InfiniteComponentWarning(VectorWarning):
    """Result would need an infinite component; the 1.0e72 sentinel is stored."""


class DivisionByZeroWarning(VectorWarning):
    """Scalar division by zero; components become inf and/or NaN."""


def warn(category, message, stacklevel=3):
    # stacklevel=3 skips this helper and the Vector3 method
    warnings.warn(message, category, stacklevel=stacklevel)
