[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rsort"
version = "0.1.0"
description = "Watch bubble, selection, insertion and quick sort rearrange an array of bars in a window"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["sorting", "visualization", "algorithms", "education", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rsort = "rsort.app:main"

[tool.hatch.build.targets.wheel]
packages = ["rsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
