[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "coursehub"
version = "1.0.0"
description = "A small interactive course management system with users, courses, homework, grading and messaging stored in binary data files"
requires-python = ">=3.10"
dependencies = []
keywords = ["education", "courses", "homework", "grading", "messaging", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
test = ["pytest"]

[project.scripts]
coursehub = "coursehub.cli:main"

[tool.setuptools.packages.find]
include = ["coursehub*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
