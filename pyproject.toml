[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotelements"
version = "0.1.0"
description = "Drawable plot elements, styles, colors and data series for pixel-based drawing backends"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "chart", "visualization", "drawing", "elements", "series"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plotelements"]

[tool.pytest.ini_options]
addopts = "-ra"
