"""Webhook Flow - generate a webhook, pick a payload, submit it."""

__version__ = "0.1.0"

from webhook_flow.config import FlowConfig
from webhook_flow.models import IdentityInput, WebhookCredential, SubmissionResult, PayloadChoice
from webhook_flow.storage import PayloadStorage
from webhook_flow.client import WebhookClient
from webhook_flow.flow import FlowRunner

__all__ = [
    "FlowConfig",
    "IdentityInput",
    "WebhookCredential",
    "SubmissionResult",
    "PayloadChoice",
    "PayloadStorage",
    "WebhookClient",
    "FlowRunner",
]
