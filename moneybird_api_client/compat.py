"""
Platform capability check performed once when a client is created.

The Moneybird API is only reachable over verified HTTPS, so the
interpreter must ship the :mod:`ssl` module with SNI support and a
usable release of ``requests`` must be installed.
"""

from __future__ import annotations

import importlib
import sys
from typing import Tuple

from .exceptions import IncompatiblePlatformError

MIN_PYTHON_VERSION: Tuple[int, int] = (3, 8)
MIN_REQUESTS_VERSION: Tuple[int, int] = (2, 20)


def _parse_version(version: str) -> Tuple[int, ...]:
    parts = []
    for piece in version.split("."):
        digits = ""
        for char in piece:
            if not char.isdigit():
                break
            digits += char
        if not digits:
            break
        parts.append(int(digits))
    return tuple(parts)


def check_compatibility() -> None:
    """Raise :class:`IncompatiblePlatformError` if HTTPS calls are impossible.

    This is a plain function without cached state; the client calls it
    exactly once from its constructor.
    """
    if sys.version_info[:2] < MIN_PYTHON_VERSION:
        raise IncompatiblePlatformError(
            "The client requires Python %d.%d or newer, found %s"
            % (MIN_PYTHON_VERSION + (sys.version.split()[0],))
        )

    try:
        ssl = importlib.import_module("ssl")
    except ImportError as exc:
        raise IncompatiblePlatformError(
            "The Python interpreter was built without the ssl module"
        ) from exc
    if not getattr(ssl, "HAS_SNI", False):
        raise IncompatiblePlatformError(
            "The ssl module does not support server name indication"
        )

    try:
        requests = importlib.import_module("requests")
    except ImportError as exc:
        raise IncompatiblePlatformError(
            "The requests package is required to reach the Moneybird API"
        ) from exc
    installed = _parse_version(getattr(requests, "__version__", ""))
    if installed < MIN_REQUESTS_VERSION:
        raise IncompatiblePlatformError(
            "requests %d.%d or newer is required, found %s"
            % (MIN_REQUESTS_VERSION + (getattr(requests, "__version__", "unknown"),))
        )
