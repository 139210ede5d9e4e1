"""Flow runner: generate webhook, select payload, store and submit it."""

from __future__ import annotations

import logging

from webhook_flow.client import WebhookClient, WebhookGateway
from webhook_flow.config import BEARER_PREFIX, FlowConfig
from webhook_flow.models import IdentityInput, SubmissionResult
from webhook_flow.selection import select_payload
from webhook_flow.storage import PayloadStorage

logger = logging.getLogger(__name__)


class WebhookUnavailableError(RuntimeError):
    """Raised when no webhook was issued and no fallback is configured."""


class SubmissionUnauthorizedError(RuntimeError):
    """Raised on 401 when an authorization prefix was already configured."""

    def __init__(self, url: str, prefix: str) -> None:
        super().__init__(f"401 Unauthorized from {url} using prefix {prefix!r}")
        self.url = url
        self.prefix = prefix


class FlowRunner:
    """Runs the one-shot webhook flow."""

    def __init__(
        self,
        config: FlowConfig,
        gateway: WebhookGateway | None = None,
        storage: PayloadStorage | None = None,
    ) -> None:
        self.config = config
        self.gateway = gateway
        self.storage = storage or PayloadStorage(
            payload_dir=config.payload_dir,
            output_file=config.output_file,
        )

    def run_flow(self, name: str, registration_id: str, email: str) -> SubmissionResult | None:
        """Run the flow, logging any failure instead of raising it."""
        try:
            identity = IdentityInput(name=name, registration_id=registration_id, email=email)

            if self.gateway is not None:
                return self.execute(identity, self.gateway)

            with WebhookClient() as client:
                return self.execute(identity, client)
        except Exception:
            logger.exception(f"Flow failed for registration number {registration_id}")
            return None

    def execute(self, identity: IdentityInput, gateway: WebhookGateway) -> SubmissionResult:
        """Run the flow, raising on failure."""
        credential = gateway.generate_webhook(self.config.generate_url, identity)

        webhook = credential.resolve_webhook(self.config.fallback_submit_url)
        if webhook is None:
            raise WebhookUnavailableError("No webhook returned and no fallback URL configured")
        logger.info(f"Webhook: {webhook}")

        choice = select_payload(identity.registration_id)
        final_query = self.storage.load(choice)
        logger.info(
            f"Using {choice.resource_path} based on registration number "
            f"{identity.registration_id} (payload {choice.value})"
        )

        output = self.storage.save(final_query)
        logger.info(f"Final payload stored at: {output}")

        result = self._submit(gateway, webhook, credential.access_token, final_query)
        if result.success:
            logger.info("Submitted successfully")
        else:
            logger.warning(f"Submission finished with status {result.status_code}")
        return result

    def _submit(
        self,
        gateway: WebhookGateway,
        webhook: str,
        access_token: str,
        final_query: str,
    ) -> SubmissionResult:
        prefix = self.config.auth_prefix
        result = gateway.submit(webhook, f"{prefix}{access_token}", final_query)
        result.authorization_prefix = prefix

        if not result.unauthorized:
            logger.info(f"Webhook response: status={result.status_code} body={result.body}")
            return result

        if self.config.has_auth_prefix:
            raise SubmissionUnauthorizedError(webhook, prefix)

        logger.warning(f"401 Unauthorized. Retrying with {BEARER_PREFIX!r} prefix...")
        retry = gateway.submit(webhook, f"{BEARER_PREFIX}{access_token}", final_query)
        retry.authorization_prefix = BEARER_PREFIX
        logger.info(f"Retry response: status={retry.status_code} body={retry.body}")

        if retry.unauthorized:
            raise SubmissionUnauthorizedError(webhook, BEARER_PREFIX)
        return retry
