[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "runetools"
version = "0.1.0"
description = "Font editing helpers: undo stacks, virtual font tables, measurement and shape-drawing tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["font", "glyph", "cmap", "hhea", "hmtx", "undo", "font-editor"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Text Processing :: Fonts",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["runetools"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
