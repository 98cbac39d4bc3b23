"""
Server configuration read from COLORCODE_* environment variables.
"""

import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "COLORCODE_"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class ServerSettings(BaseModel):
    host: str = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=8973, ge=1, le=65535, description="Port to listen on")
    log_level: LogLevel = Field(default="INFO", description="Root logging level")
    mcp_enabled: bool = Field(default=True, description="Mount the MCP endpoint")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerSettings":
        """Build settings from the environment, e.g. COLORCODE_PORT=9000."""
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name.upper())
            if raw is not None:
                values[name] = raw.upper() if name == "log_level" else raw
        return cls(**values)
