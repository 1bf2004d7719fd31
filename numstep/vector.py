"""Real vectors with finite-difference gradients and a step-size adapting gradient ascent."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator

_DIFF_STEP = 1e-4
_ASCENT_TOLERANCE = 1e-5
_ASCENT_MAX_STEPS = 25


class Vector:
    """A fixed-dimension vector of floats."""

    __slots__ = ("_components",)

    def __init__(self, components: Iterable[float]) -> None:
        self._components = [float(c) for c in components]

    @classmethod
    def zeros(cls, dimension: int) -> Vector:
        """Return the zero vector of the given dimension."""
        if dimension < 0:
            raise ValueError("dimension must not be negative")
        return cls([0.0] * dimension)

    def _check_index(self, index: int) -> int:
        if not isinstance(index, int):
            raise TypeError("vector indices must be integers")
        if not 0 <= index < len(self._components):
            raise IndexError(f"position {index} outside of dimension {len(self)}")
        return index

    def __len__(self) -> int:
        return len(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __getitem__(self, index: int) -> float:
        return self._components[self._check_index(index)]

    def __setitem__(self, index: int, value: float) -> None:
        self._components[self._check_index(index)] = float(value)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self) != len(other):
            raise ValueError(
                f"cannot add vectors of dimension {len(self)} and {len(other)}"
            )
        return Vector(a + b for a, b in zip(self._components, other._components))

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vector(scalar * c for c in self._components)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector:
        return self * -1.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self._components == other._components

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector({self._components!r})"

    def length(self) -> float:
        """Euclidean norm."""
        return math.sqrt(sum(c * c for c in self._components))

    def _shifted(self, index: int, delta: float) -> Vector:
        moved = Vector(self._components)
        moved[index] = self[index] + delta
        return moved


def gradient(func: Callable[[Vector], float], x: Vector) -> Vector:
    """Forward-difference gradient of a scalar function at ``x``."""
    fx = func(x)
    return Vector(
        (func(x._shifted(i, _DIFF_STEP)) - fx) / _DIFF_STEP for i in range(len(x))
    )


def gradient_ascent(
    start: Vector, func: Callable[[Vector], float], step: float = 1.0
) -> Vector:
    """Climb towards a maximum of ``func``, doubling or halving the step as it goes.

    Stops after 25 iterations or once the gradient is shorter than 1e-5.
    """
    x = Vector(start)
    for _ in range(_ASCENT_MAX_STEPS):
        grad = gradient(func, x)
        if grad.length() < _ASCENT_TOLERANCE:
            break
        candidate = x + step * grad
        f_x = func(x)
        f_candidate = func(candidate)

        if f_candidate > f_x:
            doubled = x + (2 * step) * grad
            if func(doubled) > f_candidate:
                x = doubled
                step *= 2
            else:
                x = candidate
        else:
            while True:
                step /= 2
                candidate = x + step * grad
                if func(candidate) >= f_x:
                    break
            x = candidate
    return x