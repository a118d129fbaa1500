"""
Numerical solvers: scalar root finding and the inversion of the lens model.
"""
