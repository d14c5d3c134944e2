"""Helpers for choosing where Jupyter is installed and which kernels to register."""

from __future__ import annotations

from typing import Iterable

from wbi.pylang import remove_python_from_path


def remove_string(items: Iterable[str], value: str) -> list[str]:
    """Return the items without the first occurrence of ``value``."""
    result = list(items)
    if value in result:
        result.remove(value)
    return result


def remove_non_opt_python(paths: Iterable[str]) -> list[str]:
    """Keep only the Python paths that lie under an ``/opt`` location."""
    return [path for path in paths if "/opt" in path]


def jupyter_path_for(python_path: str) -> str:
    """Return the path of the ``jupyter`` executable next to ``python_path``."""
    return remove_python_from_path(python_path) + "/jupyter"