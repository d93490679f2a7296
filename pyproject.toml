[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xtag"
version = "0.1.1"
description = "Tag files and directories through extended attributes, then scan and query them"
requires-python = ">=3.10"
dependencies = []
keywords = ["xattr", "tags", "extended-attributes", "alternate-data-streams", "filesystem", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xtag = "xtag.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xtag"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
