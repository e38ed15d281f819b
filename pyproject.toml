[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hungarian"
version = "1.0.0"
description = "Solve square assignment problems (minimum cost or maximum profit) with the Hungarian algorithm"
requires-python = ">=3.10"
dependencies = []
keywords = ["hungarian", "assignment", "optimization", "matching", "operations-research"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hungarian-demo = "hungarian.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["hungarian"]

[tool.pytest.ini_options]
addopts = "-ra"
