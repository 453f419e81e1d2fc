[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fieldvision"
version = "0.1.0"
description = "Field-line scanning, RANSAC line fitting and circle fitting for robot soccer localization, with byte-order helpers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "robotics",
    "localization",
    "ransac",
    "circle-fitting",
    "computer-vision",
    "endianness",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[tool.hatch.build.targets.wheel]
packages = ["fieldvision"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
