[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cadastro"
version = "0.1.0"
description = "In-memory employee register with addresses, roles and projects, plus a small product, item and order catalogue"
requires-python = ">=3.10"
dependencies = []
keywords = ["employees", "register", "projects", "products", "orders"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cadastro = "cadastro.cli:main"
cadastro-produtos = "cadastro.produtos.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["cadastro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
