[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numstep"
version = "0.1.0"
description = "Small numerical toolkit: vectors, finite-difference gradients and Jacobians, Newton's method, gradient ascent and Euler/Heun ODE solvers"
requires-python = ">=3.10"
dependencies = []
keywords = ["numerics", "ode", "euler", "heun", "newton", "jacobian", "gradient"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
numstep = "numstep.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["numstep"]

[tool.pytest.ini_options]
addopts = "-ra"
