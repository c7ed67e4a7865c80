[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mycpayment"
version = "0.1.0"
description = "Merchant, payment and settlement ledger module with genesis import/export, message handling and paginated queries"
requires-python = ">=3.10"
dependencies = []
keywords = ["payments", "merchants", "settlements", "ledger", "genesis", "bech32"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["mycpayment"]

[tool.pytest.ini_options]
addopts = "-ra"
