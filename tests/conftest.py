"""
Shared fixtures for the export client tests
"""
from datetime import datetime

import pytest

from oceo_export.config import ExportConfig, SFTPConfig
from oceo_export.schemas import Crew, CrewCredential, CrewSeatime


class FakeTransport:
    """Records deliveries instead of talking to an SFTP server"""

    def __init__(self, error=None):
        self.calls = []
        self.error = error

    def deliver(self, remote_path, payload):
        if self.error is not None:
            raise self.error
        self.calls.append((remote_path, payload))


@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def config():
    return ExportConfig(
        org_name="acme",
        sftp=SFTPConfig(host="sftp.example.com", username="acme", password="secret"),
    )


@pytest.fixture
def crew():
    return Crew(
        context_id="ctx-1",
        external_id="C-100",
        first_name="Jane",
        last_name="Doe",
        city="Houston",
        state="TX",
        country="USA",
        email="jane@example.com",
    )


@pytest.fixture
def credential():
    return CrewCredential(
        context_id="ctx-1",
        crew_external_id="C-100",
        title="Merchant Mariner Credential",
        number="MMC-42",
        endorsements=("Tankerman PIC", "Able Seaman"),
        issued_at=datetime(2024, 1, 15),
    )


@pytest.fixture
def seatime():
    return CrewSeatime(
        context_id="ctx-1",
        crew_external_id="C-100",
        vessel_name="Gulf Runner",
        days=10,
        shift_hours=12,
    )
