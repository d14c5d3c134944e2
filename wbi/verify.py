"""Options of the ``verify`` command."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

URL_ITEMS = ("packagemanager", "connect-url")


@dataclass
class VerifyOptions:
    """Flags given to ``wbi verify``."""

    url: str = ""
    repo: str = ""
    language: str = ""
    cert_path: str = ""
    key_path: str = ""

    def validate(self, args: Sequence[str]) -> str:
        """Check the arguments against the flags and return the item to verify."""
        if not args:
            raise ValueError("no arguments provided, please provide one argument")
        if len(args) > 1:
            raise ValueError("too many arguments provided, please provide only one argument")

        item = args[0]

        if self.url and item not in URL_ITEMS:
            raise ValueError("the url flag is only supported for packagemanager and connect-url")
        if self.repo and item != "packagemanager":
            raise ValueError("the repo flag is only supported for packagemanager")
        if self.language and item != "packagemanager":
            raise ValueError("the language flag is only supported for packagemanager")
        if self.cert_path and item != "ssl":
            raise ValueError("the cert-path flag is only supported for ssl")
        if self.key_path and item != "ssl":
            raise ValueError("the key-path flag is only supported for ssl")

        if not self.url and item == "packagemanager":
            raise ValueError("the url flag is required for packagemanager")
        if self.repo and not self.language:
            raise ValueError("the language flag is required when the repo flag is provided")
        if self.language and not self.repo:
            raise ValueError("the repo flag is required when the language flag is provided")

        if not self.url and item == "connect-url":
            raise ValueError("the url flag is required for connect-url")

        if not self.cert_path and item == "ssl":
            raise ValueError("the cert-path flag is required for ssl")
        if not self.key_path and item == "ssl":
            raise ValueError("the key-path flag is required for ssl")

        return item