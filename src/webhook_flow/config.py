"""Configuration and constants for the flow."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, field_validator

ENV_PREFIX = "WEBHOOK_FLOW_"

DEFAULT_OUTPUT_FILE = Path("output.sql")
DEFAULT_AUTH_PREFIX = ""
BEARER_PREFIX = "Bearer "


class FlowConfig(BaseModel):
    generate_url: str
    fallback_submit_url: str = ""
    auth_prefix: str = DEFAULT_AUTH_PREFIX
    output_file: Path = DEFAULT_OUTPUT_FILE
    payload_dir: Path | None = None

    @field_validator("generate_url")
    @classmethod
    def validate_generate_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Generation URL cannot be empty")
        return v.strip()

    @property
    def has_auth_prefix(self) -> bool:
        return bool(self.auth_prefix and self.auth_prefix.strip())

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> FlowConfig:
        """Build a config from WEBHOOK_FLOW_* environment variables."""
        env = os.environ if environ is None else environ

        data: dict[str, str] = {"generate_url": env.get(f"{ENV_PREFIX}GENERATE_URL", "")}

        optional = {
            "fallback_submit_url": "FALLBACK_URL",
            "auth_prefix": "AUTH_PREFIX",
            "output_file": "OUTPUT_FILE",
            "payload_dir": "PAYLOAD_DIR",
        }
        for field, suffix in optional.items():
            value = env.get(f"{ENV_PREFIX}{suffix}")
            if value is not None:
                data[field] = value

        return cls(**data)
