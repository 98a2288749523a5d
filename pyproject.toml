[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lomake"
version = "0.1.0"
description = "An interpreter for the small .lo scripting language"
requires-python = ">=3.10"
dependencies = []
keywords = ["interpreter", "scripting", "language", "lo"]
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
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lomake = "lomake.interpreter:main"

[tool.hatch.build.targets.wheel]
packages = ["lomake"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
