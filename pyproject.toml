[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotkit"
version = "0.1.0"
description = "Color palettes, perceptual color maps, CONREC contouring and the data geometry of bars, box plots, error bars, vector fields and color bars"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "palette", "colormap", "contour", "conrec", "boxplot", "visualization"]
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
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plotkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
