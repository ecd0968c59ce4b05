"""Shared constants and helpers for the HTTP tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import requests

ACCESS_TOKEN = "test-token"
ADMINISTRATION_ID = "123456789"
BASE_URL = "https://moneybird.com/api/v2/123456789"

CONTACT_JSON = {
    "id": "260703856",
    "company_name": "Acme B.V.",
    "firstname": "Jan",
    "lastname": "Jansen",
    "email": "jan@acme.test",
    "sales_invoices_url": "https://moneybird.com/123456789/sales_invoices/abc/all",
}


def dumps(data) -> bytes:
    return json.dumps(data).encode("utf-8")


class RecordingSessionFactory:
    """Creates real sessions and keeps them so ``close()`` can be checked."""

    def __init__(self) -> None:
        self.sessions = []

    def __call__(self) -> requests.Session:
        session = requests.Session()
        session.close = MagicMock(wraps=session.close)
        self.sessions.append(session)
        return session
