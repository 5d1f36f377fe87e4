[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "libft"
version = "0.1.0"
description = "C-library style helpers for characters, numbers, byte buffers, strings, descriptor output, linked lists and line reading."
requires-python = ">=3.10"
dependencies = []
keywords = ["strings", "memory", "atoi", "itoa", "linked-list", "get-next-line"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["libft"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
