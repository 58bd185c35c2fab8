# config.py
# -----------------------------------------------------------------------------
# Client configuration: SFTP endpoint + credentials, organization name and
# logging. Built once, frozen, and passed to the client; no module globals.
#
# ExportConfig.from_env() reads OCEO_* variables (a .env file is honoured).
# -----------------------------------------------------------------------------

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import REMOTE_DIR
from .errors import ConfigError


@dataclass(frozen=True)
class SFTPConfig:
    """SFTP server endpoint and authentication"""
    host: str
    username: str
    port: int = 22
    private_key: Optional[bytes] = field(default=None, repr=False)
    private_key_passphrase: Optional[str] = field(default=None, repr=False)
    password: Optional[str] = field(default=None, repr=False)
    remote_dir: str = REMOTE_DIR
    timeout_seconds: float = 30.0
    known_hosts_path: Optional[str] = None

    @property
    def addr(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""
    level: str = "INFO"
    format: str = "console"


@dataclass(frozen=True)
class ExportConfig:
    """Everything the export client needs"""
    org_name: str
    sftp: SFTPConfig
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def validate(self) -> None:
        if not self.org_name.strip():
            raise ConfigError("The organization name is required.")
        if not self.sftp.host.strip():
            raise ConfigError("The SFTP host is required.")
        if not self.sftp.username.strip():
            raise ConfigError("The SFTP username is required.")
        if not self.sftp.private_key and not self.sftp.password:
            raise ConfigError("Either a private key or a password is required.")
        if not 0 < self.sftp.port < 65536:
            raise ConfigError(f"Invalid SFTP port: {self.sftp.port}")

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "ExportConfig":
        load_dotenv(env_file)

        key: Optional[bytes] = None
        inline_key = os.getenv("OCEO_SFTP_PRIVATE_KEY", "")
        key_path = os.getenv("OCEO_SFTP_PRIVATE_KEY_PATH", "")
        if inline_key:
            key = inline_key.encode("utf-8")
        elif key_path:
            path = Path(key_path).expanduser()
            if not path.exists():
                raise ConfigError(f"Private key file not found: {path}")
            key = path.read_bytes()

        try:
            port = int(os.getenv("OCEO_SFTP_PORT", "22"))
            timeout = float(os.getenv("OCEO_SFTP_TIMEOUT_SECONDS", "30"))
        except ValueError as exc:
            raise ConfigError(f"Invalid numeric setting: {exc}") from exc

        cfg = cls(
            org_name=os.getenv("OCEO_ORG_NAME", ""),
            sftp=SFTPConfig(
                host=os.getenv("OCEO_SFTP_HOST", ""),
                port=port,
                username=os.getenv("OCEO_SFTP_USER", ""),
                private_key=key,
                private_key_passphrase=os.getenv("OCEO_SFTP_PRIVATE_KEY_PASSPHRASE") or None,
                password=os.getenv("OCEO_SFTP_PASSWORD") or None,
                remote_dir=os.getenv("OCEO_SFTP_REMOTE_DIR", REMOTE_DIR),
                timeout_seconds=timeout,
                known_hosts_path=os.getenv("OCEO_SFTP_KNOWN_HOSTS") or None,
            ),
            logging=LoggingConfig(
                level=os.getenv("LOG_LEVEL", "INFO"),
                format=os.getenv("LOG_FORMAT", "console"),
            ),
        )
        cfg.validate()
        return cfg
