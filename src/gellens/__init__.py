"""
Focal length estimation for light-responsive hydrogel lenses.

A poly-NIPAM-co-spiropyran hydrogel shrinks when exposed to light and can be
treated as a lens (Ziolkowski et al., https://doi.org/10.1039/C3SM51386F).
"""
from gellens.estimator import estimate_focal_length, FocalLengthEstimator, FocalLengthEstimate
from gellens.pre.interpolation import interpolate, OutOfRangePolicy, DomainWarning, OutOfRangeError
from gellens.solvers.radius import solve_radius

__all__ = [
    "estimate_focal_length",
    "FocalLengthEstimator",
    "FocalLengthEstimate",
    "interpolate",
    "OutOfRangePolicy",
    "DomainWarning",
    "OutOfRangeError",
    "solve_radius",
]
