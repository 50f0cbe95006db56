[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wayangwave"
version = "0.1.0"
description = "Data structures and terminal screens for a music player: catalog, playlists, play queue, listening history and a follow graph"
requires-python = ">=3.10"
dependencies = []
keywords = ["music", "playlist", "queue", "terminal", "catalog"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Players",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["wayangwave"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
