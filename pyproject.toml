[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stealthprint"
version = "0.1.0"
description = "Consistent browser fingerprints and the JavaScript that applies them to an automated browser"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "browser",
    "fingerprint",
    "webgl",
    "navigator",
    "canvas",
    "user-agent",
]
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
    "Topic :: Internet :: WWW/HTTP :: Browsers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["stealthprint"]

[tool.hatch.build.targets.sdist]
include = ["stealthprint", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
