"""Options of the ``config`` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

CONFIG_ITEMS = ("ssl", "repo", "connect-url")
REPO_SOURCES = ("cran", "pypi")


@dataclass
class ConfigOptions:
    """Flags given to ``wbi config``."""

    cert_path: str = ""
    key_path: str = ""
    url: str = ""
    source: str = ""

    def validate(self, args: Sequence[str]) -> str:
        """Check the arguments against the flags and return the item to configure."""
        if not args:
            raise ValueError("no arguments provided, please provide one argument")
        if len(args) > 1:
            raise ValueError("too many arguments provided, please provide only one argument")

        item = args[0]

        if item == "ssl":
            if not self.cert_path:
                raise ValueError("the cert-path flag is required for ssl")
            if not self.key_path:
                raise ValueError("the key-path flag is required for ssl")
            if not self.url:
                raise ValueError("the url flag is required for ssl")
        else:
            if self.cert_path:
                raise ValueError("the cert-path flag is only valid for ssl")
            if self.key_path:
                raise ValueError("the key-path flag is only valid for ssl")

        if self.url and item not in CONFIG_ITEMS:
            raise ValueError("the url flag is only valid for repo, connect-url and url")

        if not self.url and item == "repo":
            raise ValueError("the url flag is required for repo")
        if not self.url and item == "connect-url":
            raise ValueError("the url flag is required for connect-url")

        if not self.source and item == "repo":
            raise ValueError("the source flag is required for repo")
        if self.source and item != "repo":
            raise ValueError("the source flag is only valid for repo")
        if item == "repo" and self.source not in REPO_SOURCES:
            raise ValueError("the source flag only allows cran and pypi")

        return item