"""Explicit Euler and Heun integrators for first-order systems and higher-order ODEs."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

from numstep.vector import Vector

SystemRhs = Callable[[Vector, float], Vector]
HigherOrderRhs = Callable[[Vector, float], float]

DEVIATION_STEP_COUNTS = (10, 100, 1000, 10000)


@dataclass(frozen=True)
class Step:
    """State after one integration step: its 1-based number, x and y."""

    index: int
    x: float
    y: Vector


class OdeSolver:
    """Integrates y' = f(y, x), or y^(n) = f(y, y', ..., y^(n-1), x).

    For a higher-order equation ``rhs`` returns the highest derivative and the
    state vector holds y and its derivatives up to order n-1.
    """

    def __init__(self, rhs: SystemRhs | HigherOrderRhs, higher_order: bool = False) -> None:
        self.rhs = rhs
        self.is_higher_order = higher_order

    @classmethod
    def system(cls, rhs: SystemRhs) -> OdeSolver:
        """Solver for a first-order system whose ``rhs`` returns a vector."""
        return cls(rhs, higher_order=False)

    @classmethod
    def higher_order(cls, rhs: HigherOrderRhs) -> OdeSolver:
        """Solver for a single equation of higher order whose ``rhs`` returns a float."""
        return cls(rhs, higher_order=True)

    def derivatives(self, y: Vector, x: float) -> Vector:
        """Derivative of the state vector ``y`` at ``x``."""
        if self.is_higher_order:
            if len(y) == 0:
                raise ValueError("state vector must not be empty")
            return Vector([*list(y)[1:], self.rhs(y, x)])
        return self.rhs(y, x)

    @staticmethod
    def _step_width(x_start: float, x_end: float, steps: int) -> float:
        if steps < 1:
            raise ValueError("number of steps must be positive")
        return (x_end - x_start) / steps

    def euler_steps(
        self, x_start: float, x_end: float, steps: int, y_start: Vector
    ) -> Iterator[Step]:
        """Yield the state after each explicit Euler step."""
        h = self._step_width(x_start, x_end, steps)
        x = x_start
        y = Vector(y_start)
        for index in range(1, steps + 1):
            y = y + self.derivatives(y, x) * h
            x += h
            yield Step(index, x, y)

    def heun_steps(
        self, x_start: float, x_end: float, steps: int, y_start: Vector
    ) -> Iterator[Step]:
        """Yield the state after each Heun step."""
        h = self._step_width(x_start, x_end, steps)
        x = x_start
        y = Vector(y_start)
        for index in range(1, steps + 1):
            slope = self.derivatives(y, x)
            predicted = y + slope * h
            slope_end = self.derivatives(predicted, x + h)
            y = y + ((slope + slope_end) * 0.5) * h
            x += h
            yield Step(index, x, y)

    @staticmethod
    def _final(steps: Iterator[Step]) -> Vector:
        last = None
        for last in steps:
            pass
        assert last is not None
        return last.y

    def euler(self, x_start: float, x_end: float, steps: int, y_start: Vector) -> Vector:
        """State at ``x_end`` by the explicit Euler method."""
        return self._final(self.euler_steps(x_start, x_end, steps, y_start))

    def heun(self, x_start: float, x_end: float, steps: int, y_start: Vector) -> Vector:
        """State at ``x_end`` by Heun's method."""
        return self._final(self.heun_steps(x_start, x_end, steps, y_start))

    def deviations(
        self, x_start: float, x_end: float, y_start: Vector, exact: float
    ) -> list[tuple[int, float, float]]:
        """Errors of y(x_end) against ``exact`` for 10, 100, 1000 and 10000 steps.

        Each entry is (steps, euler_error, heun_error), errors signed as
        approximation minus exact value.
        """
        return [
            (
                n,
                self.euler(x_start, x_end, n, y_start)[0] - exact,
                self.heun(x_start, x_end, n, y_start)[0] - exact,
            )
            for n in DEVIATION_STEP_COUNTS
        ]