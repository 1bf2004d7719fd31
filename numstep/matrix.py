"""Dense matrices, finite-difference Jacobians and Newton's method."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from numstep.vector import Vector

_DIFF_STEP = 1e-4
_NEWTON_TOLERANCE = 1e-5
_NEWTON_MAX_STEPS = 50


class SingularMatrixError(ValueError):
    """Raised when a matrix with zero determinant is inverted."""


class Matrix:
    """A rows x cols matrix of floats, indexed as ``m[row, col]``."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("matrix dimensions must not be negative")
        self._rows = rows
        self._cols = cols
        self._data = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[float]]) -> Matrix:
        """Build a matrix from an iterable of equally long rows."""
        data = [[float(v) for v in row] for row in rows]
        cols = len(data[0]) if data else 0
        if any(len(row) != cols for row in data):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(data), cols)
        matrix._data = data
        return matrix

    def _check_index(self, index: tuple[int, int]) -> tuple[int, int]:
        row, col = index
        if not (0 <= row < self._rows and 0 <= col < self._cols):
            raise IndexError(f"position {index} outside of shape {self.shape}")
        return row, col

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = self._check_index(index)
        return self._data[row][col]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        row, col = self._check_index(index)
        self._data[row][col] = float(value)

    @property
    def shape(self) -> tuple[int, int]:
        """The pair (rows, cols)."""
        return self._rows, self._cols

    def __repr__(self) -> str:
        return f"Matrix.from_rows({self._data!r})"

    def inverse(self) -> Matrix:
        """Inverse of a 2x2 matrix."""
        if self.shape != (2, 2):
            raise ValueError(f"inverse is only available for 2x2 matrices, not {self.shape}")
        (a, b), (c, d) = self._data
        det = a * d - b * c
        if det == 0:
            raise SingularMatrixError("matrix is singular")
        return Matrix.from_rows([[d / det, -b / det], [-c / det, a / det]])

    def __matmul__(self, vector: Vector) -> Vector:
        if not isinstance(vector, Vector):
            return NotImplemented
        if len(vector) != self._cols:
            raise ValueError(
                f"cannot multiply a {self._rows}x{self._cols} matrix "
                f"with a vector of dimension {len(vector)}"
            )
        return Vector(sum(a * b for a, b in zip(row, vector)) for row in self._data)


def jacobian(func: Callable[[Vector], Vector], x: Vector) -> Matrix:
    """Forward-difference Jacobian of a vector function at ``x``."""
    fx = func(x)
    result = Matrix(len(fx), len(x))
    for col in range(len(x)):
        shifted = Vector(x)
        shifted[col] = x[col] + _DIFF_STEP
        f_shifted = func(shifted)
        for row, (new, old) in enumerate(zip(f_shifted, fx)):
            result[row, col] = (new - old) / _DIFF_STEP
    return result


def newton(func: Callable[[Vector], Vector], start: Vector) -> Vector:
    """Find a zero of a two-dimensional vector function with Newton's method.

    Stops once |f(x)| < 1e-5 or after 50 steps.
    """
    x = Vector(start)
    for _ in range(_NEWTON_MAX_STEPS):
        fx = func(x)
        if fx.length() < _NEWTON_TOLERANCE:
            break
        x = x + jacobian(func, x).inverse() @ (-fx)
    return x