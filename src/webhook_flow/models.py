"""Data models exchanged with the generation and submission endpoints."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PayloadChoice(str, Enum):
    A = "A"
    B = "B"

    @property
    def resource_path(self) -> str:
        return _RESOURCE_PATHS[self]


_RESOURCE_PATHS = {
    PayloadChoice.A: "sql/q1.sql",
    PayloadChoice.B: "sql/q2.sql",
}


class IdentityInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    registration_id: str
    email: str

    def to_request(self) -> dict[str, str]:
        return {
            "name": self.name,
            "regNo": self.registration_id,
            "email": self.email,
        }


class WebhookCredential(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    webhook: str | None = None
    access_token: str = Field(alias="accessToken")

    @field_validator("access_token")
    @classmethod
    def validate_access_token(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("Access token cannot be empty")
        return v

    def resolve_webhook(self, fallback: str) -> str | None:
        """Return the issued webhook, or the fallback when none was issued."""
        if self.webhook and self.webhook.strip():
            return self.webhook
        return fallback or None


class SubmissionResult(BaseModel):
    status_code: int
    body: Any = None
    authorization_prefix: str = ""

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def unauthorized(self) -> bool:
        return self.status_code == 401

    def to_dict(self) -> dict[str, Any]:
        return {
            "status_code": self.status_code,
            "body": self.body,
            "authorization_prefix": self.authorization_prefix,
        }
