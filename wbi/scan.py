"""The ``scan`` command: list installed R or Python versions."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from wbi.pylang import PyLangError, scan_for_python_versions
from wbi.rlang import RLangError, scan_for_r_versions

logger = logging.getLogger(__name__)


@dataclass
class ScanOptions:
    """Flags given to ``wbi scan``; the command takes none."""

    def validate(self, args: Sequence[str]) -> str:
        """Check the arguments and return the language to scan for."""
        if not args:
            raise ValueError("no arguments provided, please provide one argument")
        if len(args) > 1:
            raise ValueError("too many arguments provided, please provide only one argument")

        language = args[0]
        if language not in ("r", "python"):
            raise ValueError(
                "invalid language provided, please provide one of the following: r, python"
            )
        return language


def run_scan(language: str) -> list[str]:
    """Scan for installations of ``language``, print them and return them."""
    if language == "r":
        try:
            found = scan_for_r_versions()
        except RLangError as exc:
            raise RLangError(f"issue occured in scanning for R versions: {exc}") from exc
    elif language == "python":
        try:
            found = scan_for_python_versions()
        except PyLangError as exc:
            raise PyLangError(f"issue occured in scanning for Python versions: {exc}") from exc
    else:
        raise ValueError(f"language {language} is not supported")

    message = "\n".join(found)
    print(message)
    logger.info(message)
    return found