# errors.py
# Exceptions raised by the export client. Everything derives from ExportError
# so callers can catch one type.

from __future__ import annotations

from typing import Optional


class ExportError(Exception):
    """Base exception for the export client"""
    def __init__(self, message: str, context: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ConfigError(ExportError):
    """Missing or unusable client configuration (host, user, key...)"""
    pass


class ValidationError(ExportError):
    """A record is missing a required field; the whole batch is rejected"""
    def __init__(self, field: str, kind: Optional[str] = None, index: Optional[int] = None):
        where = f" in {kind} record #{index}" if kind is not None and index is not None else ""
        super().__init__(f"The field «{field}» is required{where}.",
                         {"field": field, "kind": kind, "index": index})
        self.field = field
        self.kind = kind
        self.index = index


class SerializationError(ExportError):
    """The validated batch could not be written as CSV"""
    def __init__(self, kind: str, message: str):
        super().__init__(f"failed to marshal {kind} records: {message}", {"kind": kind})
        self.kind = kind


class TransportError(ExportError):
    """Delivery to the SFTP server failed at the given stage"""

    DIAL = "dial"
    CLIENT_INIT = "client-init"
    CREATE = "create"
    WRITE = "write"

    _DESCRIPTIONS = {
        DIAL: "failed to dial SFTP server",
        CLIENT_INIT: "failed to create SFTP client",
        CREATE: "failed to create remote file",
        WRITE: "failed to copy data to remote file",
    }

    def __init__(self, stage: str, path: Optional[str] = None, reason: str = ""):
        desc = self._DESCRIPTIONS.get(stage, stage)
        msg = f"{desc}: {reason}" if reason else desc
        super().__init__(msg, {"stage": stage, "path": path})
        self.stage = stage
        self.path = path
