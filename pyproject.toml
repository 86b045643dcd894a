[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "flightcodes"
version = "0.1.0"
description = "Parse, normalise, compare and deduplicate airline flight designators such as 'SU 0123'."
requires-python = ">=3.10"
dependencies = []
keywords = ["flight", "airline", "designator", "normalisation", "deduplication"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
flightcodes-dedup = "flightcodes.dedup:main"
flightcodes-compare = "flightcodes.compare:main"

[tool.hatch.build.targets.wheel]
packages = ["flightcodes"]

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
