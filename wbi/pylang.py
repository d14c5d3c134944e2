"""Discovery of Python installations and handling of their paths."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import PurePosixPath
from typing import Iterable, Sequence

from wbi.rlang import append_if_missing
from wbi.versions import VersionError, parse_version

logger = logging.getLogger(__name__)

GLOBAL_PYTHON_PATHS = (
    "/usr/bin/python",
    "/usr/bin/Python",
    "/usr/local/bin/python",
    "/usr/local/bin/Python",
    "/usr/lib/python",
    "/usr/lib/Python",
)
PYTHON_ROOT_DIRS = (
    "/opt/python",
    "/opt/Python",
    "/usr/local/lib/python",
    "/usr/local/lib/Python",
)
PYTHON_PROFILE_PATH = "/etc/profile.d/wbi_python.sh"


class PyLangError(Exception):
    """Scanning for Python installations failed."""


def _announce(message: str) -> None:
    print(message)
    logger.info(message)


def _python_installations(root: str) -> list[str]:
    """Paths of ``<root>/<dir>/bin/python`` that exist, in directory-name order."""
    try:
        with os.scandir(root) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise PyLangError(f"could not read {root}: {exc}") from exc

    found = []
    for entry in ordered:
        if not entry.is_dir(follow_symlinks=False):
            continue
        python_path = os.path.join(root, entry.name, "bin", "python")
        if os.path.exists(python_path):
            found.append(python_path)
    return found


def scan_for_python_versions(
    paths: Sequence[str] | None = None,
    root_dirs: Sequence[str] | None = None,
) -> list[str]:
    """List Python binaries found at ``paths`` and under ``root_dirs``.

    The first root directory is the managed location: the installations found
    there come first, newest version first. They are followed by the existing
    ``paths``, the installations under the other roots, and the ``python3``
    found on ``PATH`` when it is not listed yet.
    """
    paths = GLOBAL_PYTHON_PATHS if paths is None else paths
    roots = PYTHON_ROOT_DIRS if root_dirs is None else root_dirs

    found = [path for path in paths if os.path.exists(path)]
    managed: list[str] = []
    for index, root in enumerate(roots):
        target = managed if index == 0 else found
        target.extend(_python_installations(root))

    on_path = shutil.which("python3")
    if on_path:
        found = append_if_missing(found, on_path)

    try:
        managed_sorted = sort_opt_python_version_paths(managed)
    except PyLangError as exc:
        raise PyLangError(f"issue sorting {roots[0]} versions: {exc}") from exc
    return managed_sorted + found


def sort_opt_python_version_paths(paths: Iterable[str]) -> list[str]:
    """Order ``<root>/<version>/bin/python`` paths from the newest version to the oldest."""
    keyed = []
    for path in paths:
        parts = PurePosixPath(path).parts
        if len(parts) < 3:
            raise PyLangError(f"no version directory in path {path}")
        raw = parts[-3]
        try:
            version = parse_version(raw)
        except VersionError as exc:
            raise PyLangError(
                f"issue converting string slice to version slice: failed to parse version {raw}: {exc}"
            ) from exc
        keyed.append((version, path))
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [path for _, path in keyed]


def remove_python_from_path(path: str) -> str:
    """Remove the last ``/python`` from ``path`` so its directory can be used.

    A path without ``/python`` is returned unchanged.
    """
    index = path.rfind("/python")
    if index < 0:
        return path
    return path[:index] + path[index:].replace("/python", "", 1)


def remove_python_from_paths(paths: Iterable[str]) -> list[str]:
    """Apply :func:`remove_python_from_path` to every path."""
    return [remove_python_from_path(path) for path in paths]


def python_profile_exists(profile_path: str = PYTHON_PROFILE_PATH) -> bool:
    """Report whether the profile script that puts Python on PATH already exists."""
    if not os.path.exists(profile_path):
        return False
    _announce(f"\nAn existing {profile_path} file was found, skipping setting Python path.")
    return True