"""Command-line interface."""
import logging

from gellens.estimator import FocalLengthEstimator
from gellens.logging_config import setup_logging
from gellens.model.calibration import REFERENCE_CALIBRATION


def main() -> None:
    setup_logging(level=logging.INFO)
    logger = logging.getLogger("gellens")

    estimator = FocalLengthEstimator()
    table = REFERENCE_CALIBRATION

    logger.info(
        f"Estimating focal lengths at {len(table.flux_axis) * len(table.exposure_axis)} calibration points."
    )
    print(f"{'flux (lm)':>10} {'time (s)':>10} {'gel (mm)':>10} {'focal (mm)':>12}")
    for exposure_time in table.exposure_axis:
        for flux in table.flux_axis:
            estimate = estimator.estimate(flux, exposure_time)
            print(
                f"{flux:>10.0f} {exposure_time:>10.0f} "
                f"{estimate.gel_size:>10.3f} {estimate.focal_length:>12.6f}"
            )


if __name__ == "__main__":
    main()
