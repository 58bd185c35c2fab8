# export_service.py
# -----------------------------------------------------------------------------
# The one upload pipeline shared by every record kind:
#   1) validate every record (first failure aborts the whole batch)
#   2) render the batch as CSV (header row = column labels)
#   3) name the file {org}_{tag}_{unix seconds}.csv
#   4) hand the bytes to the transport
#
# Requirements: pandas
# -----------------------------------------------------------------------------

from __future__ import annotations

import posixpath
import time
from datetime import date, datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

import pandas as pd
import structlog

from .constants import FILE_NAME_TEMPLATE, REMOTE_DIR
from .errors import SerializationError, ValidationError
from .record_kinds import RecordKind
from .transport import Transport
from .validation import validate_batch

log = structlog.get_logger(__name__)

# --------------------------- Helpers (formatting) ----------------------------

def _cell(value: Any) -> str:
    """Render one value as CSV text; None becomes an empty cell."""
    if value is None:
        return ""
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, float):
        # 15.0 -> "15", 7.5 -> "7.5"
        return str(int(value)) if value.is_integer() else str(value)
    return str(value)


def build_rows(kind: RecordKind, records: Sequence[Any]) -> List[Dict[str, str]]:
    """One dict per record, keyed by column label, all values already strings."""
    return [{c.label: _cell(c.getter(r)) for c in kind.columns} for r in records]


def to_frame(kind: RecordKind, records: Sequence[Any]) -> pd.DataFrame:
    # Cells are strings up front so pandas never turns optional ints into floats
    return pd.DataFrame(build_rows(kind, records), columns=kind.labels, dtype=str)


def serialize(kind: RecordKind, records: Sequence[Any]) -> bytes:
    """CSV bytes (UTF-8, "\\n" line endings) for an already validated batch."""
    try:
        df = to_frame(kind, records)
        text = df.to_csv(index=False, na_rep="", lineterminator="\n")
    except Exception as exc:
        raise SerializationError(kind.name, str(exc)) from exc
    return text.encode("utf-8")


def file_name(org_name: str, kind: RecordKind, stamp: Optional[int] = None) -> str:
    if stamp is None:
        stamp = int(time.time())
    return FILE_NAME_TEMPLATE.format(org=org_name, tag=kind.tag, stamp=stamp)


def remote_path(name: str, remote_dir: str = REMOTE_DIR) -> str:
    return posixpath.join(remote_dir, name)

# ------------------------------ Upload pipeline ------------------------------

def export_records(
    kind: RecordKind,
    records: Sequence[Any],
    org_name: str,
    transport: Transport,
    remote_dir: str = REMOTE_DIR,
    clock: Callable[[], float] = time.time,
) -> Optional[str]:
    """
    Validate, serialize and deliver one batch of a single record kind.
    Returns the remote path written, or None when there was nothing to send.
    """
    if not records:
        log.info("nothing to upload", kind=kind.name)
        return None

    try:
        validate_batch(kind, records)
    except ValidationError as exc:
        log.warning("batch rejected", kind=kind.name, field=exc.field, index=exc.index,
                    records=len(records))
        raise

    payload = serialize(kind, records)
    path = remote_path(file_name(org_name, kind, int(clock())), remote_dir)

    log.info("uploading", kind=kind.name, records=len(records), path=path, size=len(payload))
    transport.deliver(path, payload)
    log.info("upload complete", kind=kind.name, path=path)
    return path
