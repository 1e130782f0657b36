[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warteg"
version = "0.1.0"
description = "Terminal point-of-sale for a small eatery: browse a menu, fill a cart, check out and review past orders."
requires-python = ">=3.10"
dependencies = []
keywords = ["point-of-sale", "menu", "cart", "checkout", "terminal"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
warteg = "warteg.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["warteg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
