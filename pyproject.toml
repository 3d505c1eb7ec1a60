[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pslam"
version = "0.1.0"
description = "Building blocks for incremental scene-graph SLAM: disjoint-set forest, fused edge predictions, configuration, argument parsing, camera matrices, timing reports and RGB-D frame I/O helpers."
requires-python = ">=3.10"
keywords = ["slam", "scene graph", "rgb-d", "union-find", "camera"]
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
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Image Processing",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["pslam"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
