from __future__ import annotations

import pytest
import requests_mock

from moneybird_api_client.transport import Transport

from tests.fixtures import ACCESS_TOKEN, ADMINISTRATION_ID, RecordingSessionFactory


@pytest.fixture
def m():
    with requests_mock.Mocker() as mocker:
        yield mocker


@pytest.fixture
def sessions() -> RecordingSessionFactory:
    return RecordingSessionFactory()


@pytest.fixture
def transport(sessions):
    with Transport(
        access_token=ACCESS_TOKEN,
        administration_id=ADMINISTRATION_ID,
        session_factory=sessions,
    ) as transport:
        yield transport
