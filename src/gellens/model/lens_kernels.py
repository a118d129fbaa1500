# lens_kernels.py
from __future__ import annotations

import math

import numba as nb


# error_model="numpy": division by zero at the pole gives inf/nan instead of raising
@nb.njit(cache=True, error_model="numpy")
def chord_length(
    r: float,
    arc_length: float,
    scale: float,
    c0: float,
    c2: float,
    c4: float,
    d0: float,
    d2: float,
) -> float:
    """
    Taylor-approximated chord length of a circular arc (mm).

    Args:
        r: Radius of the arc in mm.
        arc_length: Arc length in mm (initial gel diameter).
        scale, c0, c2, c4: Coefficients of the numerator polynomial in r.
        d0, d2: Coefficients of the denominator polynomial in u = pi - arc_length / r.
    """
    u = math.pi - arc_length / r
    u2 = u * u
    r2 = r * r
    numerator = scale * (c0 - c2 * r2 + c4 * r2 * r2)
    denominator = r2 * r * (u2 * u2 - d2 * u2 + d0) * (math.pi * r - arc_length)
    return numerator / denominator

@nb.njit(cache=True, error_model="numpy")
def chord_residual(
    r: float,
    gel_size: float,
    arc_length: float,
    scale: float,
    c0: float,
    c2: float,
    c4: float,
    d0: float,
    d2: float,
) -> float:
    """Zero-form of the chord relation: chord_length(r) - gel_size."""
    return -gel_size + chord_length(r, arc_length, scale, c0, c2, c4, d0, d2)
