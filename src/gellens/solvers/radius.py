"""
Lens Radius Solver
==================
Inverts the chord/arc model: finds the radius whose approximated chord equals
the contracted gel size.

Besides the physical root the relation formally has a mirror root of opposite
sign and, close to the pole at L / pi, spurious roots of the Taylor expansion.
The search therefore starts at a positive radius (10 mm) well above the pole
and never goes below the branch radius of the model. When the gel barely
contracted, the approximated chord cannot reach the gel size at all and the
result is NaN.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Optional
import logging

from gellens import config
from gellens.model.lens import ChordArcModel, LENS_MODEL
from gellens.solvers.root_finding import RootFinder, BracketingRootFinder, RootResult

logger = logging.getLogger(__name__)


class RadiusSolver:
    """
    Class for solving the lens radius from the gel size.
    """

    def __init__(
        self,
        model: ChordArcModel = LENS_MODEL,
        root_finder: Optional[RootFinder] = None,
        initial_guess: float = config.INITIAL_RADIUS_GUESS,
    ) -> None:
        """
        Initialize the solver.

        Args:
            model: The chord/arc relation to invert.
            root_finder: Scalar root finder; a BracketingRootFinder by default.
            initial_guess: Starting radius in mm, must exceed model.singular_radius.
        """
        if not initial_guess > model.singular_radius:
            raise ValueError(
                f"Initial guess {initial_guess} mm must exceed the singular radius "
                f"{model.singular_radius:.6f} mm."
            )

        self.model = model
        self.root_finder = root_finder if root_finder is not None else BracketingRootFinder()
        self.initial_guess = float(initial_guess)
        self.lower_bound = model.branch_radius(upper=self.initial_guess)

    def solve(self, gel_size: float) -> RootResult:
        """
        Find the radius for a gel size.

        Args:
            gel_size: Contracted gel size in mm.

        Returns:
            Converged with the radius in mm, or Divergent.
        """
        result = self.root_finder.find_root(
            lambda r: self.model.residual(r, gel_size),
            self.initial_guess,
            lower_bound=self.lower_bound,
        )
        if result.converged:
            logger.debug(f"Gel size {gel_size} mm -> radius {result.value} mm.")
        else:
            logger.debug(f"No radius for gel size {gel_size} mm: {result.reason}.")
        return result

    def radius(self, gel_size: float) -> float:
        """Radius in mm for a gel size, NaN when no root exists."""
        return self.solve(gel_size).value


@lru_cache(maxsize=1)
def get_default_solver() -> RadiusSolver:
    return RadiusSolver()


def solve_radius(gel_size: float) -> float:
    """
    Solve the lens radius (mm) for a gel size (mm) with the default model.

    Assuming the bottom of the gel stays flat, the radius of the top surface
    is the focal length. NaN is a valid result: it means the model has no
    physical root for this gel size.
    """
    return get_default_solver().radius(gel_size)
