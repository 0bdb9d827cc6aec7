"""Provide general utility functions that would not fit in other modules."""

from collections.abc import Iterable, Iterator
from contextlib import suppress
from pathlib import Path
from typing import Any


def import_module_and_submodules(package_name: str) -> None:
    """Import all modules and submodules from a package.

    From https://github.com/allenai/allennlp/blob/master/allennlp/common/util.py.

    Args:
        package_name: Name of the package to fully import.
    """
    from importlib import import_module
    from pkgutil import iter_modules

    module = import_module(package_name)
    path = getattr(module, "__path__", [])
    for _, name, _ in iter_modules(path):
        import_module_and_submodules(f"{package_name}.{name}")


def load_yaml(path: Path) -> Any:
    from yaml import safe_load

    return safe_load(path.read_text(encoding="utf8"))


def load_all_yamls(paths: Iterable[Path]) -> Iterator[tuple[Path, Any]]:
    """Load the yaml files that exist among `paths`, along with their path."""
    for path in paths:
        with suppress(FileNotFoundError):
            yield path, load_yaml(path)
