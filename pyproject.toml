[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mcpricer"
version = "0.1.0"
description = "Monte Carlo pricing of European options under geometric Brownian motion"
requires-python = ">=3.10"
dependencies = []
keywords = ["monte carlo", "options", "pricing", "black-scholes", "finance", "value at risk"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Financial and Insurance Industry",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Office/Business :: Financial :: Investment",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
mcpricer = "mcpricer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mcpricer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
