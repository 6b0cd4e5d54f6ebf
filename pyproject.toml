[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oslab"
version = "0.1.0"
description = "Classic operating-system algorithms: CPU scheduling, the banker's algorithm, page replacement, memory placement and synchronisation demos"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "operating systems",
    "scheduling",
    "round robin",
    "bankers algorithm",
    "page replacement",
    "lru",
    "lfu",
    "memory allocation",
    "dining philosophers",
    "producer consumer",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: System :: Operating System",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
oslab = "oslab.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["oslab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
