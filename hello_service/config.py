from __future__ import annotations

import os
import re
import socket
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORT = 8080
BIND_HOST = "0.0.0.0"
UNKNOWN_HOSTNAME = "unknown"

# Unsigned 16-bit grammar: optional "+", ASCII digits only, no whitespace.
_PORT_RE = re.compile(r"\+?[0-9]+")


def parse_port(raw: Optional[str]) -> int:
    """Return the listening port encoded in ``raw``.

    Missing, malformed, negative and out-of-range values all fall back to
    ``DEFAULT_PORT`` without complaint.
    """
    if raw is None or not _PORT_RE.fullmatch(raw):
        return DEFAULT_PORT
    port = int(raw)
    if port > 65535:
        return DEFAULT_PORT
    return port


def resolve_hostname() -> str:
    try:
        hostname = socket.gethostname()
    except (OSError, UnicodeError):
        return UNKNOWN_HOSTNAME
    return hostname or UNKNOWN_HOSTNAME


class ServiceConfig(BaseModel):
    """Process-wide settings, captured once before the listener starts."""

    model_config = ConfigDict(frozen=True)

    host: str = BIND_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    hostname: str = UNKNOWN_HOSTNAME

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServiceConfig":
        env = os.environ if environ is None else environ
        return cls(port=parse_port(env.get("PORT")), hostname=resolve_hostname())
