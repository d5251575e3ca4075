[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algo"
version = "0.1.0"
description = "Small algorithm exercises: base conversion, arithmetic, list helpers, Big O examples and simple sorts"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "sorting", "base conversion", "fibonacci", "gcd", "big-o"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
algo-gcd = "algo.gcd_cli:main"

[tool.hatch.build.targets.wheel]
packages = ["algo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
