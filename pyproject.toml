[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "avlkit"
version = "0.1.0"
description = "Self-balancing AVL trees and plain binary search trees with conversion to AVL form"
requires-python = ">=3.10"
dependencies = []
keywords = ["avl", "binary search tree", "bst", "balanced tree", "data structures"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
avlkit-avl = "avlkit.avl:main"
avlkit-bst = "avlkit.bst:main"

[tool.hatch.build.targets.wheel]
packages = ["avlkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
