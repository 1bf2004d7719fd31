"""Command line demo: integrate two sample ODEs with Euler's and Heun's methods."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

from numstep.ode import OdeSolver, Step
from numstep.vector import Vector


def system_rhs(y: Vector, x: float) -> Vector:
    """y1' = 2 y2 - x y1,  y2' = y1 y2 - 2 x^3."""
    return Vector([2 * y[1] - x * y[0], y[0] * y[1] - 2 * x**3])


def third_order_rhs(y: Vector, x: float) -> float:
    """y''' = 2 x y' y'' + 2 y^2 y'."""
    value, first, second = y[0], y[1], y[2]
    return 2 * x * first * second + 2 * value * value * first


def _print_steps(steps: Iterable[Step]) -> None:
    for step in steps:
        print(f"Step {step.index}:")
        print(f"x = {step.x:g}")
        print("y = (" + "; ".join(f"{c:g}" for c in step.y) + ")")


def _read_choice() -> int | None:
    text = input(
        "Choose the method (1 = Euler, 2 = Heun, 3 = third-order ODE with deviations): "
    )
    print()
    try:
        return int(text.strip())
    except ValueError:
        return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the chosen demo and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="numstep", description="Euler and Heun integration demo."
    )
    parser.add_argument(
        "choice",
        nargs="?",
        type=int,
        help="1 = Euler, 2 = Heun, 3 = third-order ODE deviation analysis",
    )
    args = parser.parse_args(argv)

    choice = args.choice
    if choice is None:
        try:
            choice = _read_choice()
        except EOFError:
            choice = None
        if choice is None:
            print("invalid choice", file=sys.stderr)
            return 1

    system = OdeSolver.system(system_rhs)
    y0 = Vector([0.0, 1.0])

    if choice == 1:
        print("=== Euler method ===")
        _print_steps(system.euler_steps(0.0, 2.0, 100, y0))
    elif choice == 2:
        print("=== Heun method ===")
        _print_steps(system.heun_steps(0.0, 2.0, 100, y0))
    elif choice == 3:
        print("=== Third-order ODE: deviation analysis ===")
        solver = OdeSolver.higher_order(third_order_rhs)
        exact = 0.5
        print(f"\nComparison of the approximations with y(2) = {exact:g}")
        print("---------------------------------------")
        for n, euler_error, heun_error in solver.deviations(
            1.0, 2.0, Vector([1.0, -1.0, 2.0]), exact
        ):
            print(f"Deviation of Euler with {n} steps: {euler_error:g}")
            print(f"Deviation of Heun with {n} steps: {heun_error:g}")
    return 0


if __name__ == "__main__":
    sys.exit(main())