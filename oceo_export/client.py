# client.py
# Public entry point: OCEOExportClient wraps a frozen ExportConfig and a transport
# and exposes one upload_* method per record kind.

from __future__ import annotations

from typing import Optional

import structlog

from . import record_kinds as K
from .config import ExportConfig
from .export_service import export_records
from .schemas import (
    Crew, CrewCredential, CrewSeatime, Vessel, VesselSchedule,
    VesselSchedulePosition, CrewSchedule, CrewSchedulePosition,
)
from .transport import SFTPTransport, Transport

log = structlog.get_logger(__name__)


class OCEOExportClient:
    """
    Uploads record batches as CSV files to the organization's SFTP drop.

    Holds no state besides the config and the transport; every call opens and
    closes its own SFTP session. A bad private key fails here, not on upload.
    """

    def __init__(self, config: ExportConfig, transport: Optional[Transport] = None):
        config.validate()
        self.config = config
        self.transport = transport or SFTPTransport(config.sftp)
        log.debug("client ready", org=config.org_name, addr=config.sftp.addr)

    def upload(self, kind: K.RecordKind, *records) -> Optional[str]:
        """Generic upload; returns the remote path, or None for an empty batch."""
        return export_records(
            kind,
            records,
            org_name=self.config.org_name,
            transport=self.transport,
            remote_dir=self.config.sftp.remote_dir,
        )

    def upload_crew(self, *crew: Crew) -> Optional[str]:
        return self.upload(K.CREW, *crew)

    def upload_crew_credentials(self, *credentials: CrewCredential) -> Optional[str]:
        return self.upload(K.CREW_CREDENTIAL, *credentials)

    def upload_crew_seatime(self, *seatime: CrewSeatime) -> Optional[str]:
        return self.upload(K.CREW_SEATIME, *seatime)

    def upload_vessels(self, *vessels: Vessel) -> Optional[str]:
        return self.upload(K.VESSEL, *vessels)

    def upload_vessel_schedules(self, *schedules: VesselSchedule) -> Optional[str]:
        return self.upload(K.VESSEL_SCHEDULE, *schedules)

    def upload_vessel_schedule_positions(self, *positions: VesselSchedulePosition) -> Optional[str]:
        return self.upload(K.VESSEL_SCHEDULE_POSITION, *positions)

    def upload_crew_schedules(self, *schedules: CrewSchedule) -> Optional[str]:
        return self.upload(K.CREW_SCHEDULE, *schedules)

    def upload_crew_schedule_positions(self, *positions: CrewSchedulePosition) -> Optional[str]:
        return self.upload(K.CREW_SCHEDULE_POSITION, *positions)
