[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asciidoxide"
version = "0.1.0"
description = "AsciiDoc conditional preprocessing, source locations and block style analysis"
requires-python = ">=3.10"
dependencies = []
keywords = ["asciidoc", "markup", "preprocessor", "ifdef", "ifeval", "source-location"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["asciidoxide"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
