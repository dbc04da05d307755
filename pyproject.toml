[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "entest"
version = "0.2.5"
description = "Entropy tests for byte sequences: Shannon entropy, chi-square, arithmetic mean, Monte Carlo pi and serial correlation."
requires-python = ">=3.10"
dependencies = []
keywords = ["entropy", "randomness", "chi-square", "monte-carlo", "rng", "statistics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
entest = "entest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["entest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
