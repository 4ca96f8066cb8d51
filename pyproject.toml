[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "akrt"
version = "0.1.0"
description = "Runtime support library: checked fixed-width integers, optionals, results, variants, spans, vectors and scope guards"
requires-python = ">=3.10"
dependencies = []
keywords = ["runtime", "checked-arithmetic", "optional", "result", "variant", "vector", "span", "scope-guard"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["akrt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
