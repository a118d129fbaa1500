"""
Focal Length Estimation
=======================
Given the luminous flux and the exposure time of an experiment, estimate the
focal length of the 3 mm gel after it contracts:

1) interpolate the size the gel contracts to from the calibration data,
2) solve the chord/arc model for the radius of the top surface,
3) report that radius as the focal length.

The model ignores the change of the refractive index, the curvature of the
bottom surface, the loss of volume during contraction and the wavelength of
the light. Small flux and exposure time combinations (near 100 lm and 60 s)
contract the gel too little for the model and give NaN.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional
import logging

from gellens.pre.interpolation import GelSizeInterpolator, OutOfRangePolicy, get_interpolator
from gellens.solvers.radius import RadiusSolver, get_default_solver
from gellens.solvers.root_finding import RootResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FocalLengthEstimate:
    """Intermediate and final values of one estimation."""
    flux: float
    exposure_time: float
    gel_size: float
    radius: RootResult

    @property
    def focal_length(self) -> float:
        """Focal length in mm; NaN if the solver found no radius."""
        return self.radius.value

    @property
    def converged(self) -> bool:
        return self.radius.converged


class FocalLengthEstimator:
    """
    Composes the gel-size interpolator and the radius solver.
    """

    def __init__(
        self,
        interpolator: Optional[GelSizeInterpolator] = None,
        solver: Optional[RadiusSolver] = None,
    ) -> None:
        self.interpolator = interpolator if interpolator is not None else get_interpolator()
        self.solver = solver if solver is not None else get_default_solver()

    def estimate(
        self,
        flux: float,
        exposure_time: float,
        out_of_range: OutOfRangePolicy = OutOfRangePolicy.IGNORE,
    ) -> FocalLengthEstimate:
        """
        Estimate the focal length of the gel lens.

        Args:
            flux: Luminous flux used in the experiment, in lumens (100 to 5000).
            exposure_time: Time the gel was subject to the light, in seconds (60 to 3000).
            out_of_range: Handling of queries outside the calibrated range.

        Returns:
            The estimate, including the interpolated gel size.
        """
        gel_size = self.interpolator(flux, exposure_time, out_of_range=out_of_range)
        radius = self.solver.solve(gel_size)

        if not radius.converged:
            logger.info(
                f"No focal length for flux={flux} lm, exposure_time={exposure_time} s "
                f"(gel size {gel_size} mm): {radius.reason}."
            )

        return FocalLengthEstimate(
            flux=float(flux),
            exposure_time=float(exposure_time),
            gel_size=gel_size,
            radius=radius,
        )

    def focal_length(
        self,
        flux: float,
        exposure_time: float,
        out_of_range: OutOfRangePolicy = OutOfRangePolicy.IGNORE,
    ) -> float:
        return self.estimate(flux, exposure_time, out_of_range=out_of_range).focal_length


@lru_cache(maxsize=2)
def _get_estimator(extrapolate: bool) -> FocalLengthEstimator:
    return FocalLengthEstimator(interpolator=get_interpolator(extrapolate=extrapolate))


def estimate_focal_length(
    flux: float,
    exposure_time: float,
    *,
    out_of_range: OutOfRangePolicy = OutOfRangePolicy.IGNORE,
    extrapolate: bool = False,
) -> float:
    """
    Estimate the focal length (mm) of the gel lens from flux (lm) and exposure time (s).

    The result may be NaN; this is an expected outcome near the lower corner of
    the input ranges and outside the calibration table.
    """
    return _get_estimator(extrapolate).focal_length(flux, exposure_time, out_of_range=out_of_range)
