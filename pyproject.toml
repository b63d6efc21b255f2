[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plotstyle"
version = "0.1.0"
description = "Colors, palettes, relative sizes, fonts and text styles for plotting"
requires-python = ">=3.10"
dependencies = []
keywords = ["plotting", "color", "palette", "font", "style"]
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
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plotstyle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
