[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "clothsim"
version = "0.1.0"
description = "Mass-spring cloth simulation: masses, springs, cloths, constraints and integrators"
requires-python = ">=3.10"
keywords = ["physics", "simulation", "cloth", "mass-spring", "integrator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
clothsim = "clothsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["clothsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
