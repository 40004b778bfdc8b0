[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "msstyle"
version = "0.1.0"
description = "Decode, inspect, edit and re-encode the property records of Windows visual style (.msstyles) files"
requires-python = ">=3.10"
dependencies = []
keywords = ["msstyles", "visual style", "theme", "uxtheme", "windows"]
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
    "Topic :: Desktop Environment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["msstyle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
