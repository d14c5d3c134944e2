"""Parsing, ordering and filtering of dotted version numbers."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from typing import Iterable

_VERSION_RE = re.compile(
    r"^v?([0-9]+(?:\.[0-9]+)*?)"
    r"(?:-([0-9]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)"
    r"|(?:-?([A-Za-z\-~]+[0-9A-Za-z\-~]*(?:\.[0-9A-Za-z\-~]+)*)))?"
    r"(?:\+([0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))?$"
)


class VersionError(ValueError):
    """A version string could not be parsed or a version operation failed."""


def _compare_pre_part(left: str, right: str) -> int:
    left_num, right_num = left.isdigit(), right.isdigit()
    if left_num and right_num:
        a, b = int(left), int(right)
        return (a > b) - (a < b)
    if left_num:
        return -1
    if right_num:
        return 1
    return (left > right) - (left < right)


def _compare_prereleases(left: str, right: str) -> int:
    if left == right:
        return 0
    if not left:
        return 1
    if not right:
        return -1
    left_parts, right_parts = left.split("."), right.split(".")
    for a, b in zip(left_parts, right_parts):
        result = _compare_pre_part(a, b)
        if result:
            return result
    return (len(left_parts) > len(right_parts)) - (len(left_parts) < len(right_parts))


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """A parsed version: numeric segments (at least three), prerelease and metadata."""

    segments: tuple[int, ...]
    prerelease: str = ""
    metadata: str = ""

    def _compare(self, other: Version) -> int:
        width = max(len(self.segments), len(other.segments))
        left = self.segments + (0,) * (width - len(self.segments))
        right = other.segments + (0,) * (width - len(other.segments))
        if left != right:
            return 1 if left > right else -1
        return _compare_prereleases(self.prerelease, other.prerelease)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        trimmed = list(self.segments)
        while trimmed and trimmed[-1] == 0:
            trimmed.pop()
        return hash((tuple(trimmed), self.prerelease))

    def __str__(self) -> str:
        text = ".".join(str(s) for s in self.segments)
        if self.prerelease:
            text += "-" + self.prerelease
        if self.metadata:
            text += "+" + self.metadata
        return text


def parse_version(text: str) -> Version:
    """Parse a version string; raise VersionError when it is malformed."""
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise VersionError(f"malformed version: {text}")
    numbers, pre_numeric, pre_alpha, metadata = match.groups()
    segments = [int(part) for part in numbers.split(".")]
    segments.extend([0] * (3 - len(segments)))
    return Version(tuple(segments), pre_numeric or pre_alpha or "", metadata or "")


def parse_versions(texts: Iterable[str]) -> list[Version]:
    """Parse every string into a Version, failing on the first bad one."""
    versions = []
    for raw in texts:
        try:
            versions.append(parse_version(raw))
        except VersionError as exc:
            raise VersionError(f"failed to parse version {raw}: {exc}") from exc
    return versions


def format_versions(versions: Iterable[Version]) -> list[str]:
    """Render versions back into their canonical strings."""
    return [str(v) for v in versions]


def sort_versions_desc(versions: Iterable[Version]) -> list[Version]:
    """Return the versions ordered from newest to oldest."""
    return sorted(versions, reverse=True)


def remove_elements(original: list[str] | None, to_remove: Iterable[str] | None) -> list[str]:
    """Return ``original`` without any item found in ``to_remove``."""
    if original is None or to_remove is None:
        raise VersionError("slice and elements arguments cannot be nil")
    unwanted = set(to_remove)
    return [item for item in original if item not in unwanted]


def _same_line(a: Version, b: Version) -> bool:
    return a.segments[:2] == b.segments[:2]


def remove_newer_versions(versions: Iterable[Version], max_version: str) -> list[Version]:
    """Drop versions in the same major.minor line as ``max_version`` whose patch is not below it."""
    limit = parse_version(max_version)
    return [
        v
        for v in versions
        if not _same_line(v, limit) or v.segments[2] < limit.segments[2]
    ]


def remove_older_versions(versions: Iterable[Version], min_version: str) -> list[Version]:
    """Drop versions in the same major.minor line as ``min_version`` whose patch is not above it."""
    limit = parse_version(min_version)
    return [
        v
        for v in versions
        if not _same_line(v, limit) or v.segments[2] > limit.segments[2]
    ]


def remove_specific_versions(versions: Iterable[Version], specific_version: str) -> list[Version]:
    """Drop versions whose major.minor.patch equals ``specific_version``."""
    target = parse_version(specific_version)
    return [v for v in versions if v.segments[:3] != target.segments[:3]]