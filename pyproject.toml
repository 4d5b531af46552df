[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "huoma"
version = "1.0.0"
description = "Tree topologies and tree-tensor-network site tensors for quantum simulation"
requires-python = ">=3.10"
dependencies = ["numpy"]
keywords = ["quantum", "tensor-network", "ttn", "tree", "topology"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["huoma"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
