[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bfsbench"
version = "0.1.0"
description = "Breadth-first search graph benchmark: R-MAT edge generation, CSR graphs, BFS kernels, validation and TEPS statistics"
requires-python = ">=3.10"
dependencies = []
keywords = ["benchmark", "graph", "bfs", "breadth-first search", "rmat", "csr", "teps"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bfsbench = "bfsbench.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bfsbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
