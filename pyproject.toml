[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "motscore"
version = "0.4.0"
description = "MOTChallenge-style tracking evaluation: event accumulation with MOTA/MOTP, seqinfo.ini reading and detection file parsing"
requires-python = ">=3.10"
dependencies = []
keywords = ["tracking", "object-tracking", "mot", "motchallenge", "mota", "motp", "iou", "metrics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["motscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
