"""Tests for the lens radius solver."""

import math

import pytest

from gellens.model.lens import ChordArcModel, LENS_MODEL
from gellens.solvers.radius import RadiusSolver, solve_radius
from gellens.solvers.root_finding import BracketingRootFinder, Converged, Divergent

# Physical roots of the model for the calibration gel sizes
REFERENCE_ROOTS = [
    (2.75, 2.064542590727),
    (2.79, 2.270252436632),
    (2.82, 2.464671746886),
    (2.86, 2.813034527783),
    (2.90, 3.355655936566),
    (2.93, 4.056527870922),
    (2.96, 5.559982086214),
    (2.97, 6.660381504508),
    (2.98, 9.059044286342),
    (2.987, 16.907996749374),
]


@pytest.mark.parametrize("gel_size,expected", REFERENCE_ROOTS)
def test_reference_roots(gel_size, expected):
    assert solve_radius(gel_size) == pytest.approx(expected, rel=1e-9)


@pytest.mark.parametrize("gel_size", [2.6, 2.75, 2.85, 2.9, 2.95, 2.97, 2.985, 2.9879])
def test_root_validity(gel_size):
    radius = solve_radius(gel_size)
    assert math.isfinite(radius)
    assert radius > 3 / math.pi
    assert abs(LENS_MODEL.residual(radius, gel_size)) < 1e-9


def test_spurious_root_near_pole_is_not_returned():
    # 2.6 also has a root of the Taylor artifact below the branch radius (~1.37 mm)
    assert solve_radius(2.6) == pytest.approx(1.531373232526, rel=1e-9)


@pytest.mark.parametrize("gel_size", [2.99, 2.9885, 3.0, 2.5, math.nan])
def test_divergent_gel_sizes(gel_size):
    assert math.isnan(solve_radius(gel_size))


def test_divergent_result_carries_reason():
    result = RadiusSolver().solve(2.99)
    assert isinstance(result, Divergent)
    assert "no sign change" in result.reason


def test_solve_returns_converged_result():
    result = RadiusSolver().solve(2.93)
    assert isinstance(result, Converged)
    assert result.iterations > 0


def test_lower_bound_is_branch_radius():
    solver = RadiusSolver()
    assert solver.lower_bound == pytest.approx(1.372, abs=1e-3)
    assert solver.initial_guess == 10.0


def test_initial_guess_must_exceed_singular_radius():
    with pytest.raises(ValueError, match="singular radius"):
        RadiusSolver(initial_guess=0.9)


def test_other_start_reaches_same_root():
    assert RadiusSolver(initial_guess=25.0).radius(2.93) == pytest.approx(4.056527870922, rel=1e-9)


class RecordingRootFinder(BracketingRootFinder):
    """Bracketing finder that remembers the arguments it was called with."""

    def __init__(self):
        super().__init__(xtol=1e-14)
        self.calls = []

    def find_root(self, func, initial_guess, lower_bound=-math.inf):
        self.calls.append((initial_guess, lower_bound))
        return super().find_root(func, initial_guess, lower_bound)


@pytest.mark.parametrize("gel_size,expected", REFERENCE_ROOTS)
def test_root_finder_can_be_substituted(gel_size, expected):
    finder = RecordingRootFinder()
    solver = RadiusSolver(root_finder=finder)
    result = solver.solve(gel_size)
    assert isinstance(result, Converged)
    assert result.root == pytest.approx(expected, rel=1e-9)
    assert finder.calls == [(10.0, solver.lower_bound)]


def test_custom_model():
    model = ChordArcModel(scale=32.0 * 2.93 / 2.75)
    solver = RadiusSolver(model=model, root_finder=BracketingRootFinder())
    # Scaling the chord by k maps the root for g onto the root for k * g
    assert solver.radius(2.93) == pytest.approx(2.064542590727, rel=1e-8)


def test_deterministic():
    results = {solve_radius(2.88) for _ in range(5)}
    assert len(results) == 1
