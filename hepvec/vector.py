"""
Three-vector value type for kinematics.

This module defines ``Vector3``, a mutable three-dimensional Cartesian
vector used for momenta and positions. Besides the usual arithmetic it
provides magnitude and angle queries, pseudorapidity, cylindrical and
spherical views, and in-place rotations. Instances use ``__slots__`` and
always store their components as ``float``.

Degenerate input never raises: the offending branch issues a warning from
:mod:`hepvec.diagnostics` and falls back to a documented value (``0.0``,
``1.0``, the ``1.0e72`` sentinel, an unchanged vector or IEEE inf/NaN).

Examples
--------
>>> from hepvec.vector import Vector3
>>> p = Vector3(3, 4, 0)
>>> p.mag()
5.0
>>> p.pseudo_rapidity()
0.0
>>> str(p.rotate_z(0.0))
'(3.0,4.0,0.0)'
"""

from __future__ import annotations

import math
import re
from typing import Iterator, List, Optional, Tuple

import numpy as np

from hepvec import config as cfg
from hepvec.diagnostics import (
    AngleRangeWarning,
    AxisAlignedWarning,
    BadIndexWarning,
    DivisionByZeroWarning,
    InfiniteComponentWarning,
    ZeroVectorWarning,
    warn,
)

X, Y, Z = 0, 1, 2

_TOKEN_SPLIT = re.compile(r"[\s,]+")


def get_tolerance() -> float:
    """Process-wide default epsilon of the proximity tests."""
    return cfg.TOLERANCE


def _reciprocal(c: float) -> float:
    # IEEE semantics: 1/0 -> inf, 1/nan -> nan, no ZeroDivisionError
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(1.0) / np.float64(c))


def _exp(v: float) -> float:
    # overflow -> inf, matching the IEEE result of exp
    try:
        return math.exp(v)
    except OverflowError:
        return math.inf


def _sin(a: float) -> float:
    # non-finite angle -> nan, no ValueError
    return math.sin(a) if math.isfinite(a) else math.nan


def _cos(a: float) -> float:
    return math.cos(a) if math.isfinite(a) else math.nan


def _tan(a: float) -> float:
    return math.tan(a) if math.isfinite(a) else math.nan


class Vector3:
    """A three-dimensional vector with in-place transforms.

    Parameters
    ----------
    x, y, z : float
        Cartesian components, coerced to ``float``. All default to zero.

    Notes
    -----
    * Any triple of floats is a valid state, NaN and infinity included.
    * Rotations and ``set_*`` methods modify the vector in place; the
      rotations return ``self`` so calls can be chained.
    * ``==`` compares components exactly; use :meth:`is_near` for an
      approximate, scale-relative comparison.
    """

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def set(self, x: float, y: float, z: float) -> None:
        """Overwrite all three components."""
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def copy(self) -> "Vector3":
        """Return an independent copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    __copy__ = copy

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    def __getitem__(self, i: int) -> float:
        """Component ``i`` (0, 1, 2); any other index warns and gives 0.0."""
        if i == X:
            return self.x
        if i == Y:
            return self.y
        if i == Z:
            return self.z
        warn(BadIndexWarning, f"Vector3 subscripting: bad index ({i})")
        return 0.0

    def set_component(self, i: int, value: float) -> bool:
        """Set component ``i``.

        Returns ``True`` on success. For an index outside {0, 1, 2} a
        ``BadIndexWarning`` is issued, the vector is left untouched and
        ``False`` is returned.
        """
        return self._assign(i, value, stacklevel=4)

    def __setitem__(self, i: int, value: float) -> None:
        self._assign(i, value, stacklevel=4)

    def _assign(self, i: int, value: float, stacklevel: int) -> bool:
        if i == X:
            self.x = float(value)
        elif i == Y:
            self.y = float(value)
        elif i == Z:
            self.z = float(value)
        else:
            warn(BadIndexWarning, f"Vector3 subscripting: bad index ({i})", stacklevel=stacklevel)
            return False
        return True

    def __len__(self) -> int:
        return 3

    def __iter__(self) -> Iterator[float]:
        """Yield the components in order x, y, z."""
        yield self.x
        yield self.y
        yield self.z

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------
    def __add__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __iadd__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        self.z += other.z
        return self

    def __isub__(self, other: "Vector3") -> "Vector3":
        if not isinstance(other, Vector3):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        self.z -= other.z
        return self

    def __mul__(self, scalar: float) -> "Vector3":
        """Scalar multiplication from the right."""
        if isinstance(scalar, Vector3):
            return NotImplemented
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __rmul__(self, scalar: float) -> "Vector3":
        """Scalar multiplication from the left."""
        return self.__mul__(scalar)

    def __imul__(self, scalar: float) -> "Vector3":
        if isinstance(scalar, Vector3):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        self.z *= scalar
        return self

    def __truediv__(self, c: float) -> "Vector3":
        """Scalar division; dividing by zero warns and yields inf/NaN components."""
        if isinstance(c, Vector3):
            return NotImplemented
        if c == 0:
            warn(DivisionByZeroWarning,
                 "Attempt to divide vector by 0 -- will produce infinities and/or NANs")
        one_over_c = _reciprocal(c)
        return Vector3(self.x * one_over_c, self.y * one_over_c, self.z * one_over_c)

    def __itruediv__(self, c: float) -> "Vector3":
        if isinstance(c, Vector3):
            return NotImplemented
        if c == 0:
            warn(DivisionByZeroWarning,
                 "Attempt to do vector /= 0 -- "
                 "division by zero would produce infinite or NAN components")
        one_over_c = _reciprocal(c)
        self.x *= one_over_c
        self.y *= one_over_c
        self.z *= one_over_c
        return self

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    # mutable value type
    __hash__ = None

    def dot(self, other: "Vector3") -> float:
        """Dot product with another vector."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product with another vector."""
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    # ------------------------------------------------------------------
    # Magnitude
    # ------------------------------------------------------------------
    def mag2(self) -> float:
        """Squared Euclidean norm."""
        return self.x * self.x + self.y * self.y + self.z * self.z

    def mag(self) -> float:
        """Euclidean norm (magnitude) of the vector."""
        return math.sqrt(self.mag2())

    def perp2(self) -> float:
        """Squared distance from the Z axis."""
        return self.x * self.x + self.y * self.y

    def perp(self) -> float:
        """Distance from the Z axis (cylindrical rho)."""
        return math.sqrt(self.perp2())

    def set_mag(self, new_mag: float) -> None:
        """Rescale to magnitude ``new_mag`` keeping the direction.

        A zero vector has no direction: it is left unchanged and a
        ``ZeroVectorWarning`` is issued.
        """
        factor = self.mag()
        if factor == 0:
            warn(ZeroVectorWarning, "Vector3.set_mag : zero vector can't be stretched")
            return
        factor = new_mag / factor
        self.x *= factor
        self.y *= factor
        self.z *= factor

    def set_perp(self, rho: float) -> None:
        """Rescale the transverse part to ``rho``; no-op when it is zero."""
        factor = self.perp()
        if factor != 0:
            factor = rho / factor
            self.x *= factor
            self.y *= factor

    def unit(self) -> "Vector3":
        """Unit vector along this one; the zero vector maps to itself."""
        tot = self.mag2()
        if tot > 0:
            return self * (1.0 / math.sqrt(tot))
        return self.copy()

    def orthogonal(self) -> "Vector3":
        """A vector orthogonal to this one (not normalised)."""
        xx, yy, zz = abs(self.x), abs(self.y), abs(self.z)
        if xx < yy:
            if xx < zz:
                return Vector3(0.0, self.z, -self.y)
            return Vector3(self.y, -self.x, 0.0)
        if yy < zz:
            return Vector3(-self.z, 0.0, self.x)
        return Vector3(self.y, -self.x, 0.0)

    # ------------------------------------------------------------------
    # Spherical / cylindrical views
    # ------------------------------------------------------------------
    def get_phi(self) -> float:
        """Azimuth in (-pi, pi]; 0 when the XY projection vanishes."""
        if self.x == 0.0 and self.y == 0.0:
            return 0.0
        return math.atan2(self.y, self.x)

    def get_theta(self) -> float:
        """Polar angle from +Z in [0, pi]; 0 for the zero vector."""
        if self.x == 0.0 and self.y == 0.0 and self.z == 0.0:
            return 0.0
        return math.atan2(self.perp(), self.z)

    def get_r(self) -> float:
        """Spherical radius, same as :meth:`mag`."""
        return self.mag()

    def get_rho(self) -> float:
        """Cylindrical radius, same as :meth:`perp`."""
        return self.perp()

    phi = get_phi
    theta = get_theta

    def pseudo_rapidity(self) -> float:
        """Pseudorapidity ``0.5*ln((m+z)/(m-z))``.

        Returns 0 for the zero vector and ``+/-config.ETA_INFINITY`` for a
        vector lying exactly along +/-Z.
        """
        m = self.mag()
        if m == 0:
            return 0.0
        if m == self.z:
            return cfg.ETA_INFINITY
        if m == -self.z:
            return -cfg.ETA_INFINITY
        return 0.5 * math.log((m + self.z) / (m - self.z))

    eta = pseudo_rapidity
    get_eta = pseudo_rapidity

    def cos_theta(self, other: Optional["Vector3"] = None) -> float:
        """Cosine of the angle to ``other``, or of the polar angle if omitted.

        With ``other``: 0.0 when either vector is zero, otherwise clamped to
        [-1, 1]. Without: 1.0 for the zero vector, otherwise ``z/mag``.
        """
        if other is None:
            ptot = self.mag()
            return 1.0 if ptot == 0 else self.z / ptot
        ptot2 = self.mag2() * other.mag2()
        if ptot2 <= 0:
            return 0.0
        arg = self.dot(other) / math.sqrt(ptot2)
        if arg > 1.0:
            arg = 1.0
        if arg < -1.0:
            arg = -1.0
        return arg

    def cos2_theta(self, other: Optional["Vector3"] = None) -> float:
        """Squared cosine of the angle to ``other`` (or of the polar angle).

        Computed as ``(pdq/p2) * (pdq/q2)`` so that vectors which can be
        squared but not raised to the fourth power do not overflow. Only the
        upper bound is clamped.
        """
        if other is None:
            ptot2 = self.mag2()
            return 1.0 if ptot2 == 0 else self.z * self.z / ptot2
        ptot2 = self.mag2()
        qtot2 = other.mag2()
        if ptot2 == 0 or qtot2 == 0:
            return 1.0
        pdq = self.dot(other)
        arg = (pdq / ptot2) * (pdq / qtot2)
        if arg > 1.0:
            arg = 1.0
        return arg

    def angle(self, other: "Vector3") -> float:
        """Angle in radians between this vector and ``other``."""
        return math.acos(self.cos_theta(other))

    def delta_phi(self, other: "Vector3") -> float:
        """Azimuthal difference ``phi(other) - phi(self)`` wrapped into (-pi, pi]."""
        dphi = other.get_phi() - self.get_phi()
        if dphi > cfg.PI:
            dphi -= cfg.TWOPI
        elif dphi <= -cfg.PI:
            dphi += cfg.TWOPI
        return dphi

    def delta_r(self, other: "Vector3") -> float:
        """Distance ``sqrt(deta**2 + dphi**2)`` in the eta-phi plane."""
        a = self.eta() - other.eta()
        b = self.delta_phi(other)
        return math.sqrt(a * a + b * b)

    # ------------------------------------------------------------------
    # Coordinate setters
    # ------------------------------------------------------------------
    def set_phi(self, phi: float) -> None:
        """Set the azimuth keeping rho and z."""
        rho = self.perp()
        self.x = rho * _cos(phi)
        self.y = rho * _sin(phi)

    def set_theta(self, theta: float) -> None:
        """Set the polar angle keeping the magnitude and azimuth."""
        ma = self.mag()
        ph = self.get_phi()
        self.set_r_theta_phi(ma, theta, ph)

    def set_r_theta_phi(self, r: float, theta: float, phi: float) -> None:
        """Set from spherical coordinates."""
        rho = r * _sin(theta)
        self.x = rho * _cos(phi)
        self.y = rho * _sin(phi)
        self.z = r * _cos(theta)

    def set_r_eta_phi(self, r: float, eta: float, phi: float) -> None:
        """Set from radius, pseudorapidity and azimuth."""
        theta = 2.0 * math.atan(_exp(-eta))
        self.set_r_theta_phi(r, theta, phi)

    def set_rho_phi_z(self, rho: float, phi: float, z: float) -> None:
        """Set from cylindrical coordinates."""
        self.x = rho * _cos(phi)
        self.y = rho * _sin(phi)
        self.z = float(z)

    def set_eta(self, eta: float) -> None:
        """Set the pseudorapidity keeping ``r`` and ``phi``.

        Zero vector: warning, unchanged. Vector along Z: warning, then
        proceeds with ``phi = 0`` and ``r = |z|``.
        """
        phi = 0.0
        if self.x == 0 and self.y == 0:
            if self.z == 0:
                warn(ZeroVectorWarning,
                     "Attempt to set eta of zero vector -- vector is unchanged")
                return
            warn(AxisAlignedWarning,
                 "Attempt to set eta of vector along Z axis -- will use phi = 0")
            r = abs(self.z)
        else:
            r = self.get_r()
            phi = self.get_phi()
        tan_half_theta = _exp(-eta)
        t2 = tan_half_theta * tan_half_theta
        cos_theta = (1 - t2) / (1 + t2)
        self.z = r * cos_theta
        rho = r * math.sqrt(1 - cos_theta * cos_theta)
        self.y = rho * _sin(phi)
        self.x = rho * _cos(phi)

    def _set_cyl_on_axis(self, theta: float, name: str, label: str) -> None:
        # x == y == 0 here
        if self.z == 0:
            warn(ZeroVectorWarning,
                 f"Attempt to set {name} of zero vector -- vector is unchanged", stacklevel=4)
            return
        if theta == 0:
            self.z = abs(self.z)
            return
        if theta == cfg.PI:
            self.z = -abs(self.z)
            return
        warn(AxisAlignedWarning,
             f"Attempt set cylindrical {label} of vector along Z axis "
             "to a non-trivial value, while keeping rho fixed -- will return zero vector",
             stacklevel=4)
        self.z = 0.0

    def set_cyl_theta(self, theta: float) -> None:
        """Set the polar angle keeping cylindrical ``rho`` and ``phi`` fixed.

        On-axis vectors can only be flipped (theta 0 or pi); any other
        theta turns them into the zero vector. For theta exactly 0 or pi on
        an off-axis vector z would be infinite, so the signed
        ``config.ETA_INFINITY`` sentinel is stored and x, y are untouched.
        """
        if self.x == 0 and self.y == 0:
            self._set_cyl_on_axis(theta, "cylTheta", "theta")
            return
        if theta < 0 or theta > cfg.PI:
            warn(AngleRangeWarning,
                 "Setting Cyl theta of a vector based on a value not in [0, PI]")
        phi = self.get_phi()
        rho = self.get_rho()
        if theta == 0 or theta == cfg.PI:
            warn(InfiniteComponentWarning,
                 "Attempt to set cylindrical theta to 0 or PI "
                 "while keeping rho fixed -- infinite Z will be computed")
            self.z = cfg.ETA_INFINITY if theta == 0 else -cfg.ETA_INFINITY
            return
        self.z = rho / _tan(theta)
        self.y = rho * _sin(phi)
        self.x = rho * _cos(phi)

    def set_cyl_eta(self, eta: float) -> None:
        """Set the pseudorapidity keeping cylindrical ``rho`` and ``phi`` fixed."""
        theta = 2.0 * math.atan(_exp(-eta))
        if self.x == 0 and self.y == 0:
            self._set_cyl_on_axis(theta, "cylEta", "eta")
            return
        phi = self.get_phi()
        rho = self.get_rho()
        if theta == 0:
            # exp(-eta) underflowed: rho / tan(0) in IEEE arithmetic
            self.z = math.inf
        else:
            self.z = rho / _tan(theta)
        self.y = rho * _sin(phi)
        self.x = rho * _cos(phi)

    # ------------------------------------------------------------------
    # Rotations (in place, return self)
    # ------------------------------------------------------------------
    def rotate_x(self, phi: float) -> "Vector3":
        """Rotate by ``phi`` radians about the X axis."""
        sinphi = _sin(phi)
        cosphi = _cos(phi)
        ty = self.y * cosphi - self.z * sinphi
        self.z = self.z * cosphi + self.y * sinphi
        self.y = ty
        return self

    def rotate_y(self, phi: float) -> "Vector3":
        """Rotate by ``phi`` radians about the Y axis."""
        sinphi = _sin(phi)
        cosphi = _cos(phi)
        tz = self.z * cosphi - self.x * sinphi
        self.x = self.x * cosphi + self.z * sinphi
        self.z = tz
        return self

    def rotate_z(self, phi: float) -> "Vector3":
        """Rotate by ``phi`` radians about the Z axis."""
        sinphi = _sin(phi)
        cosphi = _cos(phi)
        tx = self.x * cosphi - self.y * sinphi
        self.y = self.y * cosphi + self.x * sinphi
        self.x = tx
        return self

    def rotate_uz(self, new_uz: "Vector3") -> "Vector3":
        """Apply the rotation that takes the Z axis onto ``new_uz``.

        ``new_uz`` must be a unit vector; this is not checked.
        """
        u1, u2, u3 = new_uz.x, new_uz.y, new_uz.z
        up = u1 * u1 + u2 * u2
        if up > 0:
            up = math.sqrt(up)
            px, py, pz = self.x, self.y, self.z
            self.x = (u1 * u3 * px - u2 * py) / up + u1 * pz
            self.y = (u2 * u3 * px + u1 * py) / up + u2 * pz
            self.z = -up * px + u3 * pz
        elif u3 < 0.0:
            # phi=0, theta=pi
            self.x = -self.x
            self.z = -self.z
        return self

    def rotate(self, angle: float, axis: "Vector3") -> "Vector3":
        """Rotate by ``angle`` radians about ``axis`` (Rodrigues' formula).

        The axis need not be normalised. A zero axis leaves the vector
        unchanged with a ``ZeroVectorWarning``.
        """
        ll = axis.mag()
        if ll == 0.0:
            warn(ZeroVectorWarning, "Vector3.rotate : zero axis -- vector is unchanged")
            return self
        k = axis * (1.0 / ll)
        c = _cos(angle)
        s = _sin(angle)
        kxv = k.cross(self)
        kdv = k.dot(self)
        self.set(
            self.x * c + kxv.x * s + k.x * kdv * (1.0 - c),
            self.y * c + kxv.y * s + k.y * kdv * (1.0 - c),
            self.z * c + kxv.z * s + k.z * kdv * (1.0 - c),
        )
        return self

    def transform(self, matrix) -> "Vector3":
        """Replace this vector by ``matrix @ self`` for a 3x3 matrix."""
        m = np.asarray(matrix, dtype=float)
        if m.shape != (3, 3):
            raise ValueError(f"transform expects a 3x3 matrix, got shape {m.shape}")
        self.set(*m.dot(self.to_numpy()))
        return self

    # ------------------------------------------------------------------
    # Proximity
    # ------------------------------------------------------------------
    def is_near(self, other: "Vector3", epsilon: Optional[float] = None) -> bool:
        """Scale-relative closeness: ``|self-other|^2 <= eps^2 * self.other``."""
        if epsilon is None:
            epsilon = get_tolerance()
        limit = self.dot(other) * epsilon * epsilon
        return (self - other).mag2() <= limit

    def how_near(self, other: "Vector3") -> float:
        # |v1 - v2|**2 / v1.v2, saturated at 1
        d = (self - other).mag2()
        vdv = self.dot(other)
        if vdv > 0 and d < vdv:
            return math.sqrt(d / vdv)
        if vdv == 0 and d == 0:
            return 0.0
        return 1.0

    def how_parallel(self, other: "Vector3") -> float:
        """|cross| / |dot|, saturated at 1; 0 means parallel."""
        v1v2 = abs(self.dot(other))
        if v1v2 == 0:
            return 0.0 if (self.mag2() == 0 and other.mag2() == 0) else 1.0
        abscross = self.cross(other).mag()
        if abscross >= v1v2:
            return 1.0
        return abscross / v1v2

    def is_parallel(self, other: "Vector3", epsilon: Optional[float] = None) -> bool:
        if epsilon is None:
            epsilon = get_tolerance()
        v1v2 = abs(self.dot(other))
        if v1v2 == 0:
            return self.mag2() == 0 and other.mag2() == 0
        return self.cross(other).mag2() <= epsilon * epsilon * v1v2 * v1v2

    def how_orthogonal(self, other: "Vector3") -> float:
        """|dot| / |cross|, saturated at 1; 0 means orthogonal."""
        v1v2 = abs(self.dot(other))
        if v1v2 == 0:
            return 0.0
        abscross = self.cross(other).mag()
        if v1v2 >= abscross:
            return 1.0
        return v1v2 / abscross

    def is_orthogonal(self, other: "Vector3", epsilon: Optional[float] = None) -> bool:
        if epsilon is None:
            epsilon = get_tolerance()
        return abs(self.dot(other)) <= epsilon * self.cross(other).mag()

    # ------------------------------------------------------------------
    # Conversion helpers
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        """Return a ``numpy.ndarray`` representation of this vector."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @staticmethod
    def from_numpy(arr) -> "Vector3":
        """Construct a ``Vector3`` from a 3-element array or sequence."""
        a = np.asarray(arr, dtype=float)
        if a.shape != (3,):
            raise ValueError(f"expected 3 components, got shape {a.shape}")
        return Vector3(a[0], a[1], a[2])

    def to_list(self) -> List[float]:
        """Return the components as a list ``[x, y, z]``."""
        return [self.x, self.y, self.z]

    def to_tuple(self) -> Tuple[float, float, float]:
        """Return the components as a tuple ``(x, y, z)``."""
        return (self.x, self.y, self.z)

    @classmethod
    def from_str(cls, text: str) -> "Vector3":
        """Parse ``"(x,y,z)"`` or ``"x y z"``.

        Any mix of commas and whitespace separates the three numbers and one
        surrounding pair of brackets is ignored, so ``from_str(str(v))``
        reproduces ``v`` exactly.
        """
        body = text.strip()
        if body and body[0] in "([{<" and body[-1] in ")]}>":
            body = body[1:-1]
        tokens = [t for t in _TOKEN_SPLIT.split(body.strip()) if t]
        if len(tokens) != 3:
            raise ValueError(f"expected 3 components, got {len(tokens)} in {text!r}")
        return cls(*(float(t) for t in tokens))

    def __str__(self) -> str:
        return f"({self.x!r},{self.y!r},{self.z!r})"

    def __repr__(self) -> str:
        return f"Vector3({self.x!r}, {self.y!r}, {self.z!r})"


# Unit axes. Shared instances: copy before mutating.
X_HAT = Vector3(1.0, 0.0, 0.0)
Y_HAT = Vector3(0.0, 1.0, 0.0)
Z_HAT = Vector3(0.0, 0.0, 1.0)
