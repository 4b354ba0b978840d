[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lazypipes"
version = "0.1.0"
description = "Lazy, composable iterable adapters joined with the | operator"
requires-python = ">=3.10"
dependencies = []
keywords = ["lazy", "iterator", "pipeline", "adapters", "functional"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
lazypipes-demo = "lazypipes.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["lazypipes"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
