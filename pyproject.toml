[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "htmlspec"
version = "0.1.0"
description = "A queryable catalog of HTML elements: content categories, permitted children and typed attributes."
requires-python = ">=3.10"
dependencies = []
keywords = ["html", "dom", "elements", "attributes", "content-model", "validation"]
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
    "Topic :: Text Processing :: Markup :: HTML",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["htmlspec"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
