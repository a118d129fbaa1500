"""
Calibration Data
================
Defines the table of previously measured gel sizes.

Each entry of the grid is the size (in millimeters) a 3 mm gel contracted to
after being exposed to a given luminous flux for a given time. The reference
data is fabricated and only illustrates the method.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

import numpy as np
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    import numpy.typing as npt
    from matplotlib.figure import Figure


@dataclass(frozen=True)
class CalibrationTable:
    """
    Immutable grid of gel sizes over (exposure time, flux).

    Attributes:
        flux_axis: Strictly increasing luminous flux values in lumens.
        exposure_axis: Strictly increasing exposure times in seconds.
        size_grid: size_grid[i][j] is the gel size in mm at exposure_axis[i]
            and flux_axis[j].
    """
    flux_axis: Tuple[float, ...]
    exposure_axis: Tuple[float, ...]
    size_grid: Tuple[Tuple[float, ...], ...]

    def __post_init__(self) -> None:
        # Store plain tuples so the table cannot be mutated through a shared list
        object.__setattr__(self, "flux_axis", tuple(float(f) for f in self.flux_axis))
        object.__setattr__(self, "exposure_axis", tuple(float(t) for t in self.exposure_axis))
        object.__setattr__(
            self, "size_grid", tuple(tuple(float(s) for s in row) for row in self.size_grid)
        )

        for name, axis in (("flux_axis", self.flux_axis), ("exposure_axis", self.exposure_axis)):
            if len(axis) < 2:
                raise ValueError(f"'{name}' needs at least two points, got {len(axis)}.")
            if any(b <= a for a, b in zip(axis, axis[1:])):
                raise ValueError(f"'{name}' must be strictly increasing: {axis}.")

        if len(self.size_grid) != len(self.exposure_axis):
            raise ValueError(
                f"size_grid has {len(self.size_grid)} rows, "
                f"expected one per exposure time ({len(self.exposure_axis)})."
            )
        for i, row in enumerate(self.size_grid):
            if len(row) != len(self.flux_axis):
                raise ValueError(
                    f"Row {i} of size_grid has {len(row)} values, "
                    f"expected one per flux ({len(self.flux_axis)})."
                )

    @property
    def flux_bounds(self) -> tuple[float, float]:
        return self.flux_axis[0], self.flux_axis[-1]

    @property
    def exposure_bounds(self) -> tuple[float, float]:
        return self.exposure_axis[0], self.exposure_axis[-1]

    def covers(self, flux: float, exposure_time: float) -> bool:
        """Check whether the query lies inside the rectangle spanned by the table."""
        f_min, f_max = self.flux_bounds
        t_min, t_max = self.exposure_bounds
        return f_min <= flux <= f_max and t_min <= exposure_time <= t_max

    def as_arrays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """
        Get the table as numpy arrays.

        Returns:
            Tuple (flux_axis, exposure_axis, size_grid); the grid has shape
            (len(exposure_axis), len(flux_axis)).
        """
        return (
            np.array(self.flux_axis, dtype=np.float64),
            np.array(self.exposure_axis, dtype=np.float64),
            np.array(self.size_grid, dtype=np.float64),
        )

    def plot(self, show: bool = True) -> Figure:
        """
        Plot the calibration surface as a wireframe.

        Args:
            show: Call plt.show() after drawing.

        Returns:
            The matplotlib figure.
        """
        flux, exposure, sizes = self.as_arrays()
        flux_mesh, exposure_mesh = np.meshgrid(flux, exposure)

        fig = plt.figure(figsize=(7, 5))
        ax = fig.add_subplot(projection="3d")
        ax.plot_wireframe(flux_mesh, exposure_mesh, sizes, color='r', lw=1)
        ax.scatter(flux_mesh, exposure_mesh, sizes, color='k', s=10)

        ax.set_title("Gel Size Calibration Data")
        ax.set_xlabel("Luminous flux (lm)")
        ax.set_ylabel("Exposure time (s)")
        ax.set_zlabel("Gel size (mm)")

        if show:
            plt.show()
        return fig


# Fabricated data of flux and exposure time vs. gel size
REFERENCE_CALIBRATION = CalibrationTable(
    flux_axis=(100.0, 500.0, 1000.0, 5000.0),
    exposure_axis=(60.0, 300.0, 600.0, 3000.0),
    size_grid=(
        (2.99, 2.97, 2.94, 2.90),
        (2.96, 2.93, 2.90, 2.86),
        (2.93, 2.89, 2.86, 2.82),
        (2.88, 2.82, 2.79, 2.75),
    ),
)
