[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sevenleaf"
version = "0.1.0"
description = "Building blocks for a live video compositor: OS utilities, 16-bit lane vectors, mesh builders, frame pacing and display layout"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["video", "compositor", "geometry", "frame pacing", "layout", "vector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Video",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sevenleaf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
