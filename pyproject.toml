[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filesift"
version = "0.1.0"
description = "Find files by name keywords in a directory tree and copy the chosen ones elsewhere"
requires-python = ">=3.10"
dependencies = []
keywords = ["files", "search", "keywords", "copy", "filter", "gbk"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Desktop Environment :: File Managers",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filesift = "filesift.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filesift"]

[tool.pytest.ini_options]
addopts = "-ra"
