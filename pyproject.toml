[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minibim"
version = "0.1.0"
description = "A small building-information model with users, proposals, undoable commands and element rules"
requires-python = ">=3.10"
dependencies = []
keywords = ["bim", "building", "command-pattern", "decorator", "composite", "observer"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
minibim-demo = "minibim.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["minibim"]

[tool.pytest.ini_options]
addopts = "-ra"
