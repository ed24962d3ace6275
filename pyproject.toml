[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weekendrt"
version = "0.1.0"
description = "A small Monte Carlo path tracer that renders scenes of spheres to plain-text PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "path tracing", "rendering", "ppm", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
weekendrt = "weekendrt.scene:main"

[tool.hatch.build.targets.wheel]
packages = ["weekendrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
