[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "saffron2d"
version = "0.1.0"
description = "Core building blocks for 2D applications: events, clocks, scheduling, batches, transforms, animation and a camera."
requires-python = ">=3.10"
dependencies = []
keywords = ["2d", "framework", "game", "camera", "transform", "animation", "events", "scheduling"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Application Frameworks",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["saffron2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
