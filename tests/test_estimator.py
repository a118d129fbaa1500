"""End-to-end tests for the focal length estimation."""

import logging
import math
import os

import pytest

from gellens import (
    estimate_focal_length, FocalLengthEstimator, FocalLengthEstimate,
    OutOfRangePolicy, DomainWarning, OutOfRangeError,
)
from gellens.model.lens import LENS_MODEL
from gellens.pre.interpolation import GelSizeInterpolator
from gellens.solvers.radius import RadiusSolver
from gellens.solvers.root_finding import Divergent


@pytest.mark.parametrize("flux,exposure,expected", [
    (5000, 3000, 2.064542590727),
    (500, 300, 4.056527870922),
    (1000, 600, 2.813034527783),
    (750, 450, 3.270687913333),
])
def test_regression_values(flux, exposure, expected):
    assert estimate_focal_length(flux, exposure) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("flux,exposure", [(100, 60), (120, 60), (100, 70)])
def test_lower_corner_diverges(flux, exposure):
    """Barely contracted gels are beyond the reach of the model."""
    assert math.isnan(estimate_focal_length(flux, exposure))


def test_estimate_keeps_intermediate_values():
    estimate = FocalLengthEstimator().estimate(100, 60)
    assert isinstance(estimate, FocalLengthEstimate)
    assert estimate.gel_size == 2.99
    assert isinstance(estimate.radius, Divergent)
    assert not estimate.converged
    assert math.isnan(estimate.focal_length)


def test_divergence_is_logged(caplog):
    with caplog.at_level(logging.INFO, logger="gellens"):
        FocalLengthEstimator().estimate(100, 60)
    assert "No focal length" in caplog.text


@pytest.mark.parametrize("flux", [100, 500, 1000, 5000])
@pytest.mark.parametrize("exposure", [300, 600, 3000])
def test_finite_results_satisfy_model(flux, exposure):
    estimate = FocalLengthEstimator().estimate(flux, exposure)
    assert estimate.converged
    assert estimate.focal_length > 3 / math.pi
    assert abs(LENS_MODEL.residual(estimate.focal_length, estimate.gel_size)) < 1e-9


def test_more_light_gives_shorter_focal_length():
    values = [estimate_focal_length(f, 3000) for f in (100, 500, 1000, 5000)]
    assert values == sorted(values, reverse=True)


def test_outside_table_is_nan_in_legacy_mode():
    assert math.isnan(estimate_focal_length(6000, 3000))


def test_extrapolation_is_opt_in():
    value = estimate_focal_length(6000, 3000, extrapolate=True)
    assert math.isfinite(value)
    assert value < estimate_focal_length(5000, 3000)


def test_out_of_range_policies():
    with pytest.warns(DomainWarning):
        estimate_focal_length(50, 300, out_of_range=OutOfRangePolicy.WARN)
    with pytest.raises(OutOfRangeError):
        estimate_focal_length(50, 300, out_of_range=OutOfRangePolicy.RAISE)


def test_domain_warning_points_at_caller():
    with pytest.warns(DomainWarning) as record:
        estimate_focal_length(50, 300, out_of_range=OutOfRangePolicy.WARN)
        FocalLengthEstimator().estimate(50, 300, out_of_range=OutOfRangePolicy.WARN)
    assert [os.path.basename(w.filename) for w in record] == ["test_estimator.py"] * 2


def test_nan_input_degrades_to_nan():
    assert math.isnan(estimate_focal_length(math.nan, 300))


def test_custom_components():
    estimator = FocalLengthEstimator(
        interpolator=GelSizeInterpolator(extrapolate=True),
        solver=RadiusSolver(initial_guess=20.0),
    )
    assert estimator.focal_length(500, 300) == pytest.approx(4.056527870922, rel=1e-9)


def test_deterministic():
    first = estimate_focal_length(2500, 1500)
    assert all(estimate_focal_length(2500, 1500) == first for _ in range(5))
