import math


def within(value: float, bounds: tuple[float, float]) -> bool:
    """Check whether value lies in the closed interval given by bounds."""
    return bounds[0] <= value <= bounds[1]

def is_finite(*values: float) -> bool:
    """Return True when every value is a finite real number."""
    return all(math.isfinite(v) for v in values)
