from importlib import import_module
from pathlib import Path

from .SortingAlgorithm import SortingAlgorithm

sorting_algorithms: list[SortingAlgorithm] = []
for file in sorted((Path(__file__).parent / "impl").glob("[!_]*.py")):
    module = import_module(f".{file.stem}", package=f"{__package__}.impl")
    sorting_algorithms.append(module.algorithm)
