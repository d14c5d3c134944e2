"""Options of the ``activate`` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass
class ActivateOptions:
    """Flags given to ``wbi activate``."""

    key: str = ""

    def validate(self, args: Sequence[str]) -> str:
        """Check the arguments against the flags and return the item to activate."""
        if not args:
            raise ValueError("no arguments provided, please provide one argument")
        if len(args) > 1:
            raise ValueError("too many arguments provided, please provide only one argument")

        item = args[0]
        if self.key and item != "license":
            raise ValueError("the key flag is only supported for license")
        if not self.key and item == "license":
            raise ValueError("the key flag is required for license")
        return item