[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algodojo"
version = "0.1.0"
description = "Classic algorithms, interview problems and dynamic-programming exercises, with a small command-line problem runner"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "dynamic-programming",
    "graphs",
    "a-star",
    "traveling-salesman",
    "vehicle-routing",
    "lru-cache",
    "union-find",
    "dijkstra",
    "competitive-programming",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algodojo-tessoku = "algodojo.tessoku.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algodojo"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
