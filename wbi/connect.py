"""Checks of a Posit Connect server URL."""

from __future__ import annotations

import logging

import requests

logger = logging.getLogger(__name__)

_TIMEOUT = 30


class ConnectError(Exception):
    """The Connect URL is unusable or the server could not be reached."""


def clean_connect_url(url: str) -> str:
    """Remove a single trailing slash from ``url``."""
    if not url:
        raise ConnectError("empty Connect URL")
    return url[:-1] if url.endswith("/") else url


def verify_connect_url(url: str) -> str:
    """Ping the Connect server and return its cleaned URL."""
    clean = clean_connect_url(url)
    try:
        response = requests.get(clean + "/__ping__", timeout=_TIMEOUT)
    except requests.RequestException as exc:
        raise ConnectError("error retrieving JSON data") from exc
    with response:
        if response.status_code != 200:
            raise ConnectError("error in HTTP status code")

    message = "\nConnect URL has been successfull validated."
    print(message)
    logger.info(message)
    return clean