[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "depwatch"
version = "0.1.0"
description = "Filter, enrich and rank dependency changelog entries, build plain-text digests and deliver them by Slack or e-mail."
requires-python = ">=3.10"
keywords = ["changelog", "dependencies", "digest", "notifications", "semver"]
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pyyaml",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[tool.hatch.build.targets.wheel]
packages = ["depwatch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
