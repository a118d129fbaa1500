"""
Scalar Root Finding
===================
Derivative-free root finding behind a minimal interface, so the search
strategy of the radius solver can be replaced.

A failed search is not an error: it is reported as a Divergent result whose
value is NaN, so callers can treat "no root" as an ordinary outcome.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Union
import math
import logging

import numpy as np
from scipy.optimize import brentq

from gellens import config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Converged:
    """A root was found."""
    root: float
    iterations: int = 0
    function_calls: int = 0

    @property
    def value(self) -> float:
        return self.root

    @property
    def converged(self) -> bool:
        return True


@dataclass(frozen=True)
class Divergent:
    """No finite root was found; value is NaN."""
    reason: str
    function_calls: int = 0

    @property
    def value(self) -> float:
        return math.nan

    @property
    def converged(self) -> bool:
        return False


RootResult = Union[Converged, Divergent]


class RootFinder(ABC):
    """
    Abstract base class for scalar root finders.
    """

    @abstractmethod
    def find_root(
        self,
        func: Callable[[float], float],
        initial_guess: float,
        lower_bound: float = -math.inf,
    ) -> RootResult:
        """
        Find a root of func starting from initial_guess.

        Args:
            func: Scalar function of one real variable.
            initial_guess: Starting point of the search.
            lower_bound: Roots below this value are never returned.

        Returns:
            Converged with the root, or Divergent with the reason of failure.
        """
        pass

    @staticmethod
    def _check_start(initial_guess: float, lower_bound: float) -> None:
        if not initial_guess > lower_bound:
            raise ValueError(
                f"Initial guess {initial_guess} must be greater than the lower bound {lower_bound}."
            )


class _CountedFunction:
    """Wraps a scalar function and counts its evaluations."""

    def __init__(self, func: Callable[[float], float]) -> None:
        self.func = func
        self.calls = 0

    def __call__(self, x: float) -> float:
        self.calls += 1
        return float(self.func(x))


class BracketingRootFinder(RootFinder):
    """
    Searches outward from the initial guess for a sign change, then refines
    the bracket with Brent's method.

    The search follows MATLAB's fzero: starting with dx = |x0| / 50, dx grows
    by sqrt(2) per expansion and the points x0 - dx and x0 + dx are tried in
    turn. The lower point is clamped to lower_bound, after which only the
    upper side keeps expanding.
    """

    def __init__(
        self,
        xtol: float = config.ROOT_XTOL,
        rtol: float = config.ROOT_RTOL,
        max_expansions: int = config.MAX_BRACKET_EXPANSIONS,
        max_iterations: int = config.MAX_SOLVER_ITERATIONS,
    ) -> None:
        self.xtol = xtol
        self.rtol = rtol
        self.max_expansions = max_expansions
        self.max_iterations = max_iterations

    def find_bracket(
        self,
        func: Callable[[float], float],
        initial_guess: float,
        lower_bound: float = -math.inf,
    ) -> tuple[float, float] | str:
        """
        Look for an interval [a, b] on which func changes sign.

        Returns:
            The interval, or a message explaining why none was found.
        """
        x0 = float(initial_guess)
        fx = func(x0)
        if not math.isfinite(fx):
            return f"non-finite function value {fx} at the initial guess {x0}"
        if fx == 0.0:
            return x0, x0

        dx = abs(x0) / 50.0 if x0 != 0.0 else 1.0 / 50.0
        a = b = x0
        fa = fb = fx
        lower_fixed = False

        for _ in range(self.max_expansions):
            dx *= math.sqrt(2.0)

            if not lower_fixed:
                a = x0 - dx
                if a <= lower_bound:
                    a = lower_bound
                    lower_fixed = True
                fa = func(a)
                if not math.isfinite(fa):
                    return f"non-finite function value {fa} at {a} while bracketing"
                if np.sign(fa) != np.sign(fb):
                    return a, b

            b = x0 + dx
            fb = func(b)
            if not math.isfinite(fb):
                return f"non-finite function value {fb} at {b} while bracketing"
            if np.sign(fa) != np.sign(fb):
                return a, b

        return f"no sign change found in [{a}, {b}] after {self.max_expansions} expansions"

    def find_root(
        self,
        func: Callable[[float], float],
        initial_guess: float,
        lower_bound: float = -math.inf,
    ) -> RootResult:
        self._check_start(initial_guess, lower_bound)
        counted = _CountedFunction(func)

        bracket = self.find_bracket(counted, initial_guess, lower_bound)
        if isinstance(bracket, str):
            logger.debug(f"Bracketing failed: {bracket}.")
            return Divergent(reason=bracket, function_calls=counted.calls)

        a, b = bracket
        if a == b:
            return Converged(root=a, iterations=0, function_calls=counted.calls)

        root, info = brentq(
            counted,
            a,
            b,
            xtol=self.xtol,
            rtol=self.rtol,
            maxiter=self.max_iterations,
            full_output=True,
            disp=False,
        )
        if not info.converged:
            logger.debug(f"Brent's method stopped in [{a}, {b}]: {info.flag}.")
            return Divergent(
                reason=f"Brent's method did not converge: {info.flag}",
                function_calls=counted.calls,
            )

        logger.debug(
            f"Root {root} in [{a}, {b}] after {info.iterations} iterations, "
            f"{counted.calls} function calls."
        )
        return Converged(root=float(root), iterations=info.iterations, function_calls=counted.calls)
