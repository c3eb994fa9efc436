[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sortbench"
version = "0.1.0"
description = "Comparative benchmark of classic sorting algorithms with comparison, swap, time and memory metrics"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "benchmark", "algorithms", "bubble sort", "merge sort", "quick sort"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: System :: Benchmark",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sortbench = "sortbench.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["sortbench"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
