"""HTTP client for the generation and submission endpoints."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from webhook_flow.models import IdentityInput, SubmissionResult, WebhookCredential

logger = logging.getLogger(__name__)


class WebhookGateway(Protocol):
    def generate_webhook(self, url: str, identity: IdentityInput) -> WebhookCredential: ...

    def submit(self, url: str, authorization: str, final_query: str) -> SubmissionResult: ...


class WebhookClient:
    """
    Talks to the remote endpoints over httpx.

    Generation errors raise ``httpx.HTTPStatusError``. Submission returns the
    status code for the caller to branch on, except for server errors which
    raise as well.
    """

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self.client = httpx.Client(transport=transport)

    def __enter__(self) -> WebhookClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self.client.close()

    def generate_webhook(self, url: str, identity: IdentityInput) -> WebhookCredential:
        response = self.client.post(url, json=identity.to_request())
        response.raise_for_status()

        logger.debug(f"Generation response: status={response.status_code}")
        return WebhookCredential.model_validate(response.json())

    def submit(self, url: str, authorization: str, final_query: str) -> SubmissionResult:
        headers = {"Authorization": authorization}
        response = self.client.post(url, json={"finalQuery": final_query}, headers=headers)

        if response.is_server_error:
            response.raise_for_status()

        if response.status_code == 401:
            return SubmissionResult(status_code=401)

        body = response.json() if response.content else None
        return SubmissionResult(status_code=response.status_code, body=body)
