[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rtmath"
version = "0.1.0"
description = "Vector and 4x4 matrix math for ray tracing, with small string, character, buffer, output and line-reading helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["ray tracing", "linear algebra", "vector", "matrix", "strings", "buffers"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["rtmath"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
