[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "linekit"
version = "0.1.0"
description = "Small line-oriented text tools: tail, uniq, wc and a tiny line template renderer"
requires-python = ">=3.10"
dependencies = []
keywords = ["tail", "uniq", "wc", "text", "command-line", "template"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
linekit-tail = "linekit.tail:main"
linekit-uniq = "linekit.uniq:main"
linekit-wc = "linekit.wc:main"
linekit-template = "linekit.template_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["linekit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
