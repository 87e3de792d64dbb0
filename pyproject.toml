[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "contestkit"
version = "0.1.0"
description = "Solutions to a set of small olympiad-style programming problems, as functions and command-line tools"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "competitive-programming", "olympiad", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
contestkit-lessons = "contestkit.lessons:main"
contestkit-digits = "contestkit.digits:main"
contestkit-chocolate = "contestkit.chocolate:main"
contestkit-army = "contestkit.army:main"
contestkit-paints = "contestkit.paints:main"
contestkit-bank = "contestkit.bank:main"
contestkit-hiking = "contestkit.hiking:main"

[tool.hatch.build.targets.wheel]
packages = ["contestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
