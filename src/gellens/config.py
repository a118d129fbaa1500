"""
Configuration & Constants
=========================
This module serves as the central registry for the global constants of the
focal-length estimation.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (ranges, tolerances, the initial
   radius guess) from being scattered throughout the code.
2. Testability: Every limit the solvers rely on can be imported and checked
   independently.

Exports:
    FLUX_RANGE (tuple): Documented valid luminous flux range, in lumens.
    EXPOSURE_TIME_RANGE (tuple): Documented valid exposure time range, in seconds.
    INITIAL_GEL_DIAMETER (float): Gel diameter before contraction, in mm.
    INITIAL_RADIUS_GUESS (float): Starting point of the radius search, in mm.
"""
import numpy as np

# Documented input ranges (inclusive)
FLUX_RANGE: tuple[float, float] = (100.0, 5000.0)  # lm
EXPOSURE_TIME_RANGE: tuple[float, float] = (60.0, 3000.0)  # s

# Lens geometry
INITIAL_GEL_DIAMETER: float = 3.0  # mm

# Radius search
# Must exceed INITIAL_GEL_DIAMETER / pi, the pole of the chord model.
INITIAL_RADIUS_GUESS: float = 10.0  # mm

ROOT_XTOL: float = 2e-12
ROOT_RTOL: float = 4 * float(np.finfo(float).eps)

MAX_BRACKET_EXPANSIONS: int = 60
MAX_SOLVER_ITERATIONS: int = 100

BRANCH_XATOL: float = 1e-8
