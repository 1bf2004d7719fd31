"""Vectors and 2x2-invertible matrices, finite-difference gradients and Jacobians,
Newton's method, gradient ascent and Euler/Heun ODE solvers, with a demo command."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "ode", "cli"]