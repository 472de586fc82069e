[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primeutils"
version = "0.1.0"
description = "A collection of tools for working with prime numbers."
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "sieve", "factorization", "gcd", "lcm", "number theory"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
primeutils = "primeutils.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["primeutils"]

[tool.pytest.ini_options]
addopts = "-ra"
