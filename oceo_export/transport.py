# transport.py
# -----------------------------------------------------------------------------
# SFTP delivery of one file per call:
#   connect + authenticate -> open SFTP session -> create remote file -> write
# Each stage that fails raises TransportError tagged with that stage.
# Nothing is pooled or retried; the session is closed before returning.
# -----------------------------------------------------------------------------

from __future__ import annotations

import io
from typing import Optional, Protocol

import paramiko
import structlog

from .config import SFTPConfig
from .errors import ConfigError, TransportError

log = structlog.get_logger(__name__)

_KEY_TYPES = (paramiko.RSAKey, paramiko.ECDSAKey, paramiko.Ed25519Key)


class Transport(Protocol):
    def deliver(self, remote_path: str, payload: bytes) -> None:
        ...


def load_private_key(key_bytes: bytes, passphrase: Optional[str] = None) -> paramiko.PKey:
    """Parse an RSA, ECDSA or Ed25519 private key (PEM / OpenSSH text)."""
    text = key_bytes.decode("utf-8") if isinstance(key_bytes, bytes) else str(key_bytes)
    last_exc: Optional[Exception] = None
    for key_type in _KEY_TYPES:
        try:
            return key_type.from_private_key(io.StringIO(text), password=passphrase)
        except (paramiko.SSHException, ValueError) as exc:
            last_exc = exc
    raise ConfigError(f"failed to read private key: {last_exc}")


def _close(resource, what: str) -> None:
    try:
        resource.close()
    except Exception as exc:
        log.warning("close failed", resource=what, error=str(exc))


class SFTPTransport:
    """Delivers payloads to the configured SFTP server, one session per call."""

    def __init__(self, cfg: SFTPConfig):
        self.cfg = cfg
        self._pkey = (load_private_key(cfg.private_key, cfg.private_key_passphrase)
                      if cfg.private_key else None)

    def _ssh_client(self) -> paramiko.SSHClient:
        client = paramiko.SSHClient()
        if self.cfg.known_hosts_path:
            client.load_host_keys(self.cfg.known_hosts_path)
            client.set_missing_host_key_policy(paramiko.RejectPolicy())
        else:
            client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        return client

    def deliver(self, remote_path: str, payload: bytes) -> None:
        client = self._ssh_client()
        try:
            client.connect(
                hostname=self.cfg.host,
                port=self.cfg.port,
                username=self.cfg.username,
                pkey=self._pkey,
                password=self.cfg.password,
                timeout=self.cfg.timeout_seconds,
                allow_agent=False,
                look_for_keys=False,
            )
        except (paramiko.SSHException, OSError) as exc:
            _close(client, "SFTP connection")
            raise TransportError(TransportError.DIAL, remote_path, str(exc)) from exc

        try:
            try:
                sftp = client.open_sftp()
            except (paramiko.SSHException, OSError) as exc:
                raise TransportError(TransportError.CLIENT_INIT, remote_path, str(exc)) from exc
            try:
                try:
                    remote_file = sftp.open(remote_path, "wb")
                except (paramiko.SSHException, OSError) as exc:
                    raise TransportError(TransportError.CREATE, remote_path, str(exc)) from exc
                try:
                    remote_file.write(payload)
                except (paramiko.SSHException, OSError) as exc:
                    raise TransportError(TransportError.WRITE, remote_path, str(exc)) from exc
                finally:
                    _close(remote_file, "remote file")
            finally:
                _close(sftp, "SFTP client")
        finally:
            _close(client, "SFTP connection")

        log.debug("delivered", addr=self.cfg.addr, path=remote_path, size=len(payload))
