[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "taylordual"
version = "0.1.0"
description = "Generalized dual numbers: truncated multivariate Taylor polynomials for automatic differentiation of any order"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "automatic differentiation",
    "taylor polynomial",
    "dual numbers",
    "differential algebra",
    "sparse polynomial",
]
classifiers = [
    "Development Status :: 3 - Alpha",
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
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["taylordual"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
