[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "partasks"
version = "0.1.0"
description = "Data-parallel reductions over vectors, matrices and text, split across worker partitions"
requires-python = ">=3.10"
dependencies = []
keywords = ["parallel", "reduction", "matrix", "integration", "scatter", "gather"]
classifiers = [
    "Development Status :: 4 - Beta",
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

[tool.hatch.build.targets.wheel]
packages = ["partasks"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
