[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "noname"
version = "0.1.0"
description = "Package tooling for the noname circuit language: manifests, dependency graphs, JSON inputs, source spans and package scaffolding"
requires-python = ">=3.11"
dependencies = []
keywords = ["circuits", "zero-knowledge", "package-manager", "manifest", "dependencies"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Compilers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
noname = "noname.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["noname"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
