"""Discovery and validation of R installations."""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import PurePosixPath
from typing import Iterable, Sequence

import requests

from wbi.versions import (
    VersionError,
    format_versions,
    parse_version,
    parse_versions,
    remove_elements,
    sort_versions_desc,
)

logger = logging.getLogger(__name__)

R_VERSIONS_URL = "https://cdn.posit.co/r/versions.json"
NON_NUMERIC_R_VERSIONS = ("next", "devel")

GLOBAL_R_PATHS = (
    "/usr/bin/R",
    "/usr/local/bin/R",
    "/usr/lib/R",
)
R_ROOT_DIRS = (
    "/opt/R",
    "/usr/local/lib/R",
)
SYMLINK_BIN_DIR = "/usr/local/bin"

_TIMEOUT = 30


class RLangError(Exception):
    """Scanning for, or looking up, R versions failed."""


def _announce(message: str) -> None:
    print(message)
    logger.info(message)


def append_if_missing(items: Iterable[str], item: str) -> list[str]:
    """Return the items with ``item`` added at the end unless already present."""
    result = list(items)
    if item not in result:
        result.append(item)
    return result


def _r_installations(root: str) -> list[str]:
    """Paths of ``<root>/<dir>/bin/R`` that exist, in directory-name order."""
    try:
        with os.scandir(root) as entries:
            ordered = sorted(entries, key=lambda entry: entry.name)
    except FileNotFoundError:
        return []
    except OSError as exc:
        raise RLangError(f"could not read {root}: {exc}") from exc

    found = []
    for entry in ordered:
        if not entry.is_dir(follow_symlinks=False):
            continue
        rpath = os.path.join(root, entry.name, "bin", "R")
        if os.path.exists(rpath):
            found.append(rpath)
    return found


def scan_for_r_versions(
    paths: Sequence[str] | None = None,
    root_dirs: Sequence[str] | None = None,
) -> list[str]:
    """List R binaries found at ``paths`` and under ``root_dirs``.

    The first root directory is the managed location: the installations found
    there come first, newest version first. They are followed by the existing
    ``paths``, the installations under the other roots, and the ``R`` found
    on ``PATH`` when it is not listed yet.
    """
    paths = GLOBAL_R_PATHS if paths is None else paths
    roots = R_ROOT_DIRS if root_dirs is None else root_dirs

    found = [path for path in paths if os.path.exists(path)]
    managed: list[str] = []
    for index, root in enumerate(roots):
        target = managed if index == 0 else found
        target.extend(_r_installations(root))

    on_path = shutil.which("R")
    if on_path:
        found = append_if_missing(found, on_path)

    try:
        managed_sorted = sort_opt_r_version_paths(managed)
    except RLangError as exc:
        raise RLangError(f"issue sorting {roots[0]} versions: {exc}") from exc
    return managed_sorted + found


def sort_opt_r_version_paths(paths: Iterable[str]) -> list[str]:
    """Order ``<root>/<version>/bin/R`` paths from the newest version to the oldest."""
    keyed = []
    for path in paths:
        parts = PurePosixPath(path).parts
        if len(parts) < 3:
            raise RLangError(f"no version directory in path {path}")
        raw = parts[-3]
        try:
            version = parse_version(raw)
        except VersionError as exc:
            raise RLangError(
                f"issue converting string slice to version slice: failed to parse version {raw}: {exc}"
            ) from exc
        keyed.append((version, path))
    keyed.sort(key=lambda pair: pair[0], reverse=True)
    return [path for _, path in keyed]


def remove_system_r_paths(paths: Iterable[str]) -> list[str]:
    """Drop the paths that lie under a ``/usr/`` directory."""
    return [path for path in paths if "/usr/" not in path]


def r_symlinks_exist(bin_dir: str = SYMLINK_BIN_DIR) -> bool:
    """Report whether an ``R`` or ``Rscript`` entry already exists in ``bin_dir``."""
    r_path = os.path.join(bin_dir, "R")
    rscript_path = os.path.join(bin_dir, "Rscript")

    r_exists = os.path.exists(r_path)
    if r_exists:
        _announce(f"\nAn existing R symlink has been detected ({r_path})")
    rscript_exists = os.path.exists(rscript_path)
    if rscript_exists:
        _announce(f"\nAn existing Rscript symlink has been detected ({rscript_path})")
    return r_exists or rscript_exists


def retrieve_valid_r_versions() -> list[str]:
    """Fetch the installable R versions, newest first."""
    try:
        response = requests.get(R_VERSIONS_URL, timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise RLangError("error retrieving JSON data") from exc
    with response:
        if response.status_code != 200:
            raise RLangError("error in HTTP status code")
        try:
            payload = response.json()
        except ValueError as exc:
            raise RLangError("error unmarshalling JSON data") from exc

    if not isinstance(payload, dict):
        raise RLangError("error unmarshalling JSON data")
    raw_versions = payload.get("r_versions")
    if raw_versions is not None and not isinstance(raw_versions, list):
        raise RLangError("error unmarshalling JSON data")

    try:
        numeric = remove_elements(raw_versions, NON_NUMERIC_R_VERSIONS)
    except VersionError as exc:
        raise RLangError("failed to remove non-numeric R versions") from exc
    try:
        versions = parse_versions(numeric)
    except VersionError as exc:
        raise RLangError(f"issue converting string slice to version slice: {exc}") from exc
    return format_versions(sort_versions_desc(versions))


def validate_r_versions(versions: Iterable[str]) -> None:
    """Raise RLangError unless every version is an installable R version."""
    try:
        available = set(retrieve_valid_r_versions())
    except RLangError as exc:
        raise RLangError(f"error retrieving valid R versions: {exc}") from exc
    for version in versions:
        if version not in available:
            raise RLangError(f"version {version} is not a valid R version")