[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "controlbox"
version = "0.1.0"
description = "Building blocks for control systems: hysteresis, PT1 lag elements, time signals and a small time-domain simulator"
requires-python = ">=3.10"
keywords = ["control", "hysteresis", "pt1", "first-order lag", "simulation", "signal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]
dependencies = [
    "matplotlib",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
controlbox-sim = "controlbox.simulator:main"

[tool.hatch.build.targets.wheel]
packages = ["controlbox"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
