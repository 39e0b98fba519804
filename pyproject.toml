[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "osalgos"
version = "0.1.0"
description = "Classic operating-system and graph algorithms: CPU scheduling, page replacement, deadlock avoidance, minimum spanning trees and concurrency demos."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "page replacement",
    "lru",
    "bankers algorithm",
    "minimum spanning tree",
    "kruskal",
    "prim",
    "dekker",
    "readers writers",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
osalgos = "osalgos.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["osalgos"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
