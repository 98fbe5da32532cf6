[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adtkit"
version = "0.1.0"
description = "Bounded stack and queue types, with a postfix calculator and a sliding-window sum tool built on them."
requires-python = ">=3.10"
dependencies = []
keywords = ["stack", "queue", "data structures", "rpn", "postfix", "sliding window"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
adtkit-rpn = "adtkit.rpn:main"
adtkit-window = "adtkit.window:main"

[tool.hatch.build.targets.wheel]
packages = ["adtkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
