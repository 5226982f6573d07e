[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termsview"
version = "0.1.0"
description = "A scrollable terms-of-service agreement window with a hand-drawn scroll bar"
requires-python = ">=3.10"
dependencies = []
keywords = ["scrolling", "terms of service", "agreement", "tkinter", "scroll bar"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Developers",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termsview = "termsview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["termsview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
