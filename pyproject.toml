[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "labkit"
version = "0.1.0"
description = "Vector and matrix routines with interactive console tools, matrix file generators and loop-order benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "matrix", "linear algebra", "benchmark", "teaching"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
labkit-vector = "labkit.vector_cli:main"
labkit-matrix = "labkit.matrix_cli:main"
labkit-students = "labkit.students:main"
labkit-matgen = "labkit.matgen:main"
labkit-matgen-rows = "labkit.matgen:main_rows"
labkit-loop-order = "labkit.loop_order:main"
labkit-transposed = "labkit.transposed:main"

[tool.hatch.build.targets.wheel]
packages = ["labkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
