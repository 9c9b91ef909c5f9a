"""Proxmox MCP configuration loaded from the environment."""

from dataclasses import dataclass, field
import os
from typing import List, Mapping, Optional

DEFAULT_PORT = 8006

_TRUE_VALUES = ("true", "1")
_FALSE_VALUES = ("false", "0")
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when the environment does not describe a usable connection."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__("Configuration error: " + "; ".join(problems))


def _parse_bool(name: str, raw: str, problems: List[str]) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    problems.append(f"{name} must be one of true, false, 1, 0 (got {raw!r})")
    return True


@dataclass(frozen=True)
class Config:
    """Connection settings for a Proxmox VE cluster.

    The token secret is kept out of ``repr`` so the config can be logged.
    """

    host: str
    token_id: str
    token_secret: str = field(repr=False)
    port: int = DEFAULT_PORT
    allow_self_signed_certs: bool = True
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Load configuration from environment variables."""
        env = os.environ if environ is None else environ
        problems: List[str] = []

        host = env.get("PROXMOX_HOST", "").strip()
        if not host:
            problems.append("PROXMOX_HOST is required")

        token_id = env.get("PROXMOX_TOKEN_ID", "").strip()
        if not token_id:
            problems.append("PROXMOX_TOKEN_ID is required")

        token_secret = env.get("PROXMOX_TOKEN_SECRET", "").strip()
        if not token_secret:
            problems.append("PROXMOX_TOKEN_SECRET is required")

        port = DEFAULT_PORT
        raw_port = env.get("PROXMOX_PORT", "").strip()
        if raw_port:
            try:
                port = int(raw_port)
            except ValueError:
                problems.append(f"PROXMOX_PORT must be an integer (got {raw_port!r})")

        allow_self_signed = _parse_bool(
            "PROXMOX_ALLOW_SELF_SIGNED_CERTS",
            env.get("PROXMOX_ALLOW_SELF_SIGNED_CERTS", "true"),
            problems,
        )

        log_level = env.get("PROXMOX_MCP_LOG_LEVEL", "INFO").strip().upper()
        if log_level not in _LOG_LEVELS:
            problems.append(
                f"PROXMOX_MCP_LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)} (got {log_level!r})"
            )

        if problems:
            raise ConfigError(problems)

        return cls(
            host=host,
            port=port,
            token_id=token_id,
            token_secret=token_secret,
            allow_self_signed_certs=allow_self_signed,
            log_level=log_level,
        )
