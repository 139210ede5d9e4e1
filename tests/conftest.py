"""Shared fixtures for webhook-flow tests."""

import json

import httpx
import pytest

GENERATE_URL = "https://gen.example.test/generateWebhook"
WEBHOOK_URL = "https://hook.example.test/testWebhook"
FALLBACK_URL = "https://fallback.example.test/testWebhook"
TOKEN = "tok-123"


class RecordingEndpoints:
    """In-memory generation and submission endpoints for httpx.MockTransport."""

    def __init__(self, webhook=WEBHOOK_URL, submit_statuses=(200,), token=TOKEN):
        self.webhook = webhook
        self.token = token
        self.submit_statuses = list(submit_statuses)
        self.generate_requests: list[httpx.Request] = []
        self.submit_requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        if str(request.url) == GENERATE_URL:
            self.generate_requests.append(request)
            body = {"accessToken": self.token}
            if self.webhook is not None:
                body["webhook"] = self.webhook
            return httpx.Response(200, json=body)

        self.submit_requests.append(request)
        index = min(len(self.submit_requests), len(self.submit_statuses)) - 1
        status = self.submit_statuses[index]
        if status == 401:
            return httpx.Response(401, text="Unauthorized")
        return httpx.Response(status, json={"success": status < 300, "attempt": len(self.submit_requests)})

    def submitted_json(self, index: int = 0) -> dict:
        return json.loads(self.submit_requests[index].content)

    def authorization(self, index: int = 0) -> str:
        return self.submit_requests[index].headers["Authorization"]


@pytest.fixture
def payload_dir(tmp_path):
    sql_dir = tmp_path / "payloads" / "sql"
    sql_dir.mkdir(parents=True)
    (sql_dir / "q1.sql").write_text("\n  SELECT 'odd' AS payload;  \n", encoding="utf-8")
    (sql_dir / "q2.sql").write_text("SELECT 'even' AS payload;\n\n", encoding="utf-8")
    return tmp_path / "payloads"
