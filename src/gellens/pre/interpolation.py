"""
Gel-Size Interpolation
======================
Finds the size a gel contracts to for an arbitrary flux and exposure time by
bilinear interpolation of the calibration table.

Queries outside the table behave like MATLAB interp2: the result is NaN and
nothing is reported. Callers can opt into a warning, an exception, or linear
extrapolation instead.
"""
from __future__ import annotations

from enum import StrEnum
from functools import lru_cache
import logging
import os
import warnings

import numpy as np
from scipy.interpolate import RegularGridInterpolator

from gellens import config
from gellens.model.calibration import CalibrationTable, REFERENCE_CALIBRATION
from gellens.utils import within, is_finite

logger = logging.getLogger(__name__)

# Warnings are attributed to the first caller outside the package
_PACKAGE_DIR = os.path.dirname(os.path.dirname(__file__)) + os.sep


class DomainWarning(UserWarning):
    """Issued when a query lies outside the calibrated or documented range."""


class OutOfRangeError(ValueError):
    """Raised for out-of-range queries when OutOfRangePolicy.RAISE is selected."""


class OutOfRangePolicy(StrEnum):
    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"


class GelSizeInterpolator:
    """
    Bilinear interpolator over a calibration table.
    """

    def __init__(
        self,
        table: CalibrationTable = REFERENCE_CALIBRATION,
        extrapolate: bool = False,
    ) -> None:
        """
        Args:
            table: Calibration data to interpolate.
            extrapolate: Extend the boundary cells linearly instead of
                returning NaN outside the table.
        """
        self.table = table
        self.extrapolate = extrapolate

        flux, exposure, sizes = table.as_arrays()
        self._interpolator = RegularGridInterpolator(
            (exposure, flux),
            sizes,
            method="linear",
            bounds_error=False,
            fill_value=None if extrapolate else np.nan,
        )

    def out_of_range_reason(self, flux: float, exposure_time: float) -> str | None:
        """Describe why a query is out of range, or return None if it is not."""
        if not self.table.covers(flux, exposure_time):
            return (
                f"query (flux={flux}, exposure_time={exposure_time}) lies outside the "
                f"calibration table (flux {self.table.flux_bounds}, "
                f"exposure time {self.table.exposure_bounds})"
            )
        if not within(flux, config.FLUX_RANGE):
            return f"flux {flux} lm is outside the documented range {config.FLUX_RANGE}"
        if not within(exposure_time, config.EXPOSURE_TIME_RANGE):
            return (
                f"exposure time {exposure_time} s is outside the documented range "
                f"{config.EXPOSURE_TIME_RANGE}"
            )
        return None

    def __call__(
        self,
        flux: float,
        exposure_time: float,
        out_of_range: OutOfRangePolicy = OutOfRangePolicy.IGNORE,
    ) -> float:
        """
        Interpolate the gel size.

        Args:
            flux: Luminous flux in lumens.
            exposure_time: Exposure time in seconds.
            out_of_range: What to do when the query is out of range.

        Returns:
            Gel size in mm. NaN for non-finite inputs, and outside the table
            unless extrapolation is enabled.

        Raises:
            OutOfRangeError: Query out of range with OutOfRangePolicy.RAISE.
        """
        flux = float(flux)
        exposure_time = float(exposure_time)

        if not is_finite(flux, exposure_time):
            logger.debug(f"Non-finite query (flux={flux}, exposure_time={exposure_time}).")
            return float("nan")

        policy = OutOfRangePolicy(out_of_range)
        if policy is not OutOfRangePolicy.IGNORE:
            reason = self.out_of_range_reason(flux, exposure_time)
            if reason is not None:
                if policy is OutOfRangePolicy.RAISE:
                    raise OutOfRangeError(reason)
                warnings.warn(reason, DomainWarning, skip_file_prefixes=(_PACKAGE_DIR,))

        gel_size = float(self._interpolator([[exposure_time, flux]])[0])
        logger.debug(
            f"Gel size at flux={flux} lm, exposure_time={exposure_time} s: {gel_size} mm."
        )
        return gel_size


@lru_cache(maxsize=None)
def get_interpolator(
    table: CalibrationTable = REFERENCE_CALIBRATION,
    extrapolate: bool = False,
) -> GelSizeInterpolator:
    """Return a shared interpolator for the given table."""
    return GelSizeInterpolator(table=table, extrapolate=extrapolate)


def interpolate(
    flux: float,
    exposure_time: float,
    *,
    table: CalibrationTable = REFERENCE_CALIBRATION,
    out_of_range: OutOfRangePolicy = OutOfRangePolicy.IGNORE,
    extrapolate: bool = False,
) -> float:
    """
    Interpolate the gel size (mm) for a flux (lm) and exposure time (s).

    See GelSizeInterpolator.__call__ for the handling of out-of-range queries.
    """
    return get_interpolator(table, extrapolate)(flux, exposure_time, out_of_range=out_of_range)
