# numstep

A small, dependency-free numerical toolkit for teaching and experimenting.

- `numstep.vector`
  - `Vector(components)`: a vector of floats. `Vector.zeros(n)` builds the
    zero vector. Supports `len()`, iteration, indexing (`v[i]`, out-of-range
    indices raise `IndexError`), `+` between vectors of equal dimension
    (otherwise `ValueError`), multiplication by a scalar on either side,
    unary `-`, `==` and `length()` (the Euclidean norm).
  - `gradient(func, x)`: forward-difference gradient of a scalar function,
    with difference step `1e-4`.
  - `gradient_ascent(start, func, step=1.0)`: climbs towards a maximum of
    `func`, doubling the step when that improves further and halving it when
    the step overshoots. It stops after 25 iterations or once the gradient is
    shorter than `1e-5`.
- `numstep.matrix`
  - `Matrix(rows, cols)`: a zero-filled matrix; `Matrix.from_rows(rows)`
    builds one from equally long rows. Elements are read and written as
    `m[row, col]`; `m.shape` is the pair `(rows, cols)`.
  - `Matrix.inverse()`: inverse of a 2×2 matrix. Other shapes raise
    `ValueError`; a zero determinant raises `SingularMatrixError` (a subclass
    of `ValueError`).
  - Matrix–vector products with the ` @ ` operator: `m @ v`.
  - `jacobian(func, x)`: forward-difference Jacobian of a vector function,
    with difference step `1e-4`.
  - `newton(func, start)`: Newton's method for a function from R² to R².
    It stops once `|f(x)| < 1e-5` or after 50 steps.
- `numstep.ode`
  - `OdeSolver.system(rhs)`: solver for a first-order system `y' = rhs(y, x)`,
    where `rhs` returns a `Vector`.
  - `OdeSolver.higher_order(rhs)`: solver for a single equation
    `y⁽ⁿ⁾ = rhs(y, x)`, where the state vector holds `y, y', …, y⁽ⁿ⁻¹⁾` and
    `rhs` returns the highest derivative as a float.
  - `euler(x_start, x_end, steps, y_start)` and `heun(...)` return the state at
    `x_end`; `euler_steps(...)` and `heun_steps(...)` yield a `Step`
    (`index`, `x`, `y`) after every step. A step count below 1 raises
    `ValueError`.
  - `deviations(x_start, x_end, y_start, exact)` returns
    `(steps, euler_error, heun_error)` for 10, 100, 1000 and 10000 steps, each
    error being the first state component minus `exact`.

## Installation

```
pip install .
```

## Usage

```python
from numstep.vector import Vector
from numstep.ode import OdeSolver

def rhs(y, x):
    return Vector([2 * y[1] - x * y[0], y[0] * y[1] - 2 * x ** 3])

solver = OdeSolver.system(rhs)
y_end = solver.heun(0.0, 2.0, 100, Vector([0.0, 1.0]))
print(list(y_end))

for step in solver.euler_steps(0.0, 2.0, 10, Vector([0.0, 1.0])):
    print(step.index, step.x, list(step.y))
```

A third-order equation `y''' = f(y, y', y'', x)`:

```python
def f(y, x):
    return 2 * x * y[1] * y[2] + 2 * y[0] ** 2 * y[1]

solver = OdeSolver.higher_order(f)
for steps, euler_error, heun_error in solver.deviations(
    1.0, 2.0, Vector([1.0, -1.0, 2.0]), 0.5
):
    print(steps, euler_error, heun_error)
```

Jacobian, Newton's method and matrix products:

```python
from numstep.matrix import Matrix, jacobian, newton
from numstep.vector import Vector

def g(x):
    return Vector([x[0] ** 3 * x[1] ** 3 - 2 * x[1], x[0] - 2])

root = newton(g, Vector([1.0, 1.0]))
j = jacobian(g, Vector([1.0, 1.0]))
print(j.shape, j.inverse() @ Vector([1.0, 0.0]))
```

## Command line

```
numstep [CHOICE]
```

`CHOICE` selects the demo; without it the command asks for it on standard
input:

1. Euler's method on the system `y1' = 2 y2 - x y1`, `y2' = y1 y2 - 2 x³`
   over `[0, 2]` from `(0, 1)` with 100 steps, printing every step.
2. Heun's method on the same system.
3. Deviations of Euler and Heun from the exact value `y(2) = 0.5` for
   `y''' = 2 x y' y'' + 2 y² y'` started at `y(1) = 1, y'(1) = -1, y''(1) = 2`,
   using 10, 100, 1000 and 10000 steps.

An answer that is not an integer prints `invalid choice` and exits with
status 1; any other number prints nothing further.

## Limitations

- `Matrix.inverse()` handles only 2×2 matrices, so `newton` only works for
  functions from R² to R².
- There are no other matrix operations (no matrix–matrix products, addition
  or general linear solvers), and the ODE solvers offer only fixed-step
  explicit Euler and Heun methods.

## Running the tests

```
pip install .[test]
pytest
```