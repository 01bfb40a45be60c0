"""
Settings for the catalog service, read from environment variables.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_GREETING = "Welcome to the Product Catalog API"


@dataclass
class Settings:
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    DEBUG: bool = False
    GREETING: str = DEFAULT_GREETING
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        port = env.get("PORT", "5000")
        try:
            port_number = int(port)
        except ValueError:
            raise ValueError(f"PORT must be an integer, got {port!r}")
        return cls(
            HOST=env.get("HOST", "0.0.0.0"),
            PORT=port_number,
            DEBUG=env.get("FLASK_DEBUG", "false").lower() in ("1", "true", "yes"),
            GREETING=env.get("CATALOG_GREETING", DEFAULT_GREETING),
            LOG_LEVEL=env.get("LOG_LEVEL", "INFO").upper(),
        )
