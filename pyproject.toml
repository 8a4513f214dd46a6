[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsalgo"
version = "0.1.0"
description = "Classic data structures and graph algorithms: queues, stacks, linked lists, search trees, heaps, BFS and DFS"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "data structures",
    "algorithms",
    "queue",
    "stack",
    "linked list",
    "binary search tree",
    "avl",
    "heap",
    "bfs",
    "dfs",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dsalgo-queue = "dsalgo.queue_array:main"
dsalgo-stack = "dsalgo.stack_array:main"
dsalgo-sll = "dsalgo.singly_linked:main"
dsalgo-dll = "dsalgo.doubly_linked:main"
dsalgo-bst = "dsalgo.bst:main"
dsalgo-avl = "dsalgo.avl:main"
dsalgo-heap = "dsalgo.heap:main"
dsalgo-bfs = "dsalgo.bfs:main"
dsalgo-dfs = "dsalgo.dfs:main"

[tool.hatch.build.targets.wheel]
packages = ["dsalgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
