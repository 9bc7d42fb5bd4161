[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "conicfit"
version = "0.1.0"
description = "Fit implicit conic curves to 2D polylines, estimate distances and classify them"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["conic", "curve fitting", "geometry", "taubin", "implicit curves"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
conicfit = "conicfit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["conicfit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
