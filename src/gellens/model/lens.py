"""
Lens Geometry Model
===================
Relates the contracted gel size to the radius of curvature of its top surface.

The lens is modeled as a fraction of a circle where:
1) the arc length equals the gel diameter before contraction,
2) the distance between the two ends of the arc (the chord) is the gel size,
3) the radius r is the unknown quantity.

Chord and radius are related through the Sine Law; for speed both sines are
replaced by their Taylor series. With u = pi - L / r:

    chord(r) = scale * (c0 - c2 r^2 + c4 r^4) / (r^3 (u^4 - d2 u^2 + d0) (pi r - L))

The defaults are the coefficients for L = 3 mm. Only the top surface is
assumed to curve, so the radius is also the focal length.
"""
from __future__ import annotations

from dataclasses import dataclass, astuple
import math
import logging

from scipy.optimize import minimize_scalar

from gellens import config
from gellens.model.lens_kernels import chord_length, chord_residual

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChordArcModel:
    """
    Coefficients of the Taylor-approximated chord/arc relation.

    Attributes:
        arc_length: Arc length L in mm (initial gel diameter).
        scale: Overall factor of the numerator.
        c0, c2, c4: Numerator coefficients of r^0, r^2 and r^4.
        d0, d2: Denominator coefficients of u^0 and u^2.
    """
    arc_length: float = config.INITIAL_GEL_DIAMETER
    scale: float = 32.0
    c0: float = 243.0
    c2: float = 540.0
    c4: float = 360.0
    d0: float = 1920.0
    d2: float = 80.0

    @property
    def coefficients(self) -> tuple[float, ...]:
        """Coefficients in the order the compiled kernels expect them."""
        return tuple(float(c) for c in astuple(self))

    @property
    def singular_radius(self) -> float:
        """Radius at which (pi r - L) vanishes; the model has a pole there."""
        return self.arc_length / math.pi

    def chord(self, r: float) -> float:
        """Approximated chord length in mm for an arc of radius r."""
        return float(chord_length(float(r), *self.coefficients))

    def residual(self, r: float, gel_size: float) -> float:
        """Zero-form of the relation; vanishes at the radius matching gel_size."""
        return float(chord_residual(float(r), float(gel_size), *self.coefficients))

    def branch_radius(self, upper: float, xatol: float = config.BRANCH_XATOL) -> float:
        """
        Find where the approximated chord is smallest on (singular_radius, upper).

        Coming from the pole the chord first drops, reaches a minimum and only
        then rises towards L like the exact chord 2 r sin(L / 2r) does. Radii
        below this minimum are an artifact of the Taylor expansion.

        Args:
            upper: Upper end of the search interval in mm.
            xatol: Absolute tolerance on the radius.

        Returns:
            The radius of the minimal chord in mm.
        """
        if upper <= self.singular_radius:
            raise ValueError(
                f"Upper bound {upper} must exceed the singular radius {self.singular_radius:.6f}."
            )

        result = minimize_scalar(
            self.chord,
            bounds=(self.singular_radius, upper),
            method="bounded",
            options={"xatol": xatol},
        )
        logger.debug(f"Branch radius {result.x:.6f} mm, chord {result.fun:.6f} mm.")
        return float(result.x)


LENS_MODEL = ChordArcModel()
