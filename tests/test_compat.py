"""Tests for the platform capability check."""

from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from moneybird_api_client import compat
from moneybird_api_client.exceptions import IncompatiblePlatformError

real_import_module = importlib.import_module


def fake_import(**replacements):
    def import_module(name, package=None):
        if name in replacements:
            replacement = replacements[name]
            if isinstance(replacement, Exception):
                raise replacement
            return replacement
        return real_import_module(name, package)

    return import_module


def test_current_platform_is_compatible():
    compat.check_compatibility()


def test_missing_ssl(monkeypatch):
    monkeypatch.setattr(compat.importlib, "import_module", fake_import(ssl=ImportError("ssl")))
    with pytest.raises(IncompatiblePlatformError, match="ssl module"):
        compat.check_compatibility()


def test_ssl_without_sni(monkeypatch):
    monkeypatch.setattr(
        compat.importlib, "import_module", fake_import(ssl=SimpleNamespace(HAS_SNI=False))
    )
    with pytest.raises(IncompatiblePlatformError, match="server name indication"):
        compat.check_compatibility()


def test_missing_requests(monkeypatch):
    monkeypatch.setattr(
        compat.importlib, "import_module", fake_import(requests=ImportError("requests"))
    )
    with pytest.raises(IncompatiblePlatformError, match="requests package"):
        compat.check_compatibility()


def test_outdated_requests(monkeypatch):
    monkeypatch.setattr(
        compat.importlib,
        "import_module",
        fake_import(requests=SimpleNamespace(__version__="2.5.3")),
    )
    with pytest.raises(IncompatiblePlatformError, match="2.5.3"):
        compat.check_compatibility()


@pytest.mark.parametrize(
    "version,expected",
    [
        ("2.31.0", (2, 31, 0)),
        ("2.0.0rc1", (2, 0, 0)),
        ("3", (3,)),
        ("", ()),
    ],
)
def test_parse_version(version, expected):
    assert compat._parse_version(version) == expected
