[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "edakit"
version = "1.0.0"
description = "Classic data structures and algorithms: linked lists, stacks, queues, search trees, sorting, mazes, k-means clustering and similarity search."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "data structures",
    "algorithms",
    "linked list",
    "binary search tree",
    "avl",
    "red-black tree",
    "quicksort",
    "maze",
    "k-means",
    "similarity search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
edakit-parentheses = "edakit.linked:main"
edakit-kth = "edakit.sorting:main"
edakit-maze = "edakit.maze:main"
edakit-labyrinth = "edakit.labyrinth:main"
edakit-bench = "edakit.benchmark:main"

[tool.hatch.build.targets.wheel]
packages = ["edakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
