[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quadsim"
version = "0.1.0"
description = "Interactive particle collision simulation comparing brute-force and quadtree collision detection"
requires-python = ">=3.10"
keywords = ["quadtree", "collision detection", "particles", "simulation", "visualization", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
quadsim = "quadsim.app:main"

[tool.hatch.build.targets.wheel]
packages = ["quadsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
