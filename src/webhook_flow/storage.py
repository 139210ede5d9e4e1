"""Payload resource loading and local output storage."""

from __future__ import annotations

from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path

from webhook_flow.config import DEFAULT_OUTPUT_FILE
from webhook_flow.models import PayloadChoice


class PayloadUnavailableError(RuntimeError):
    """Raised when a payload resource is missing or blank."""


class PayloadStorage:
    """Reads bundled payload resources and writes the selected one to disk."""

    def __init__(
        self,
        payload_dir: Path | str | None = None,
        output_file: Path | str = DEFAULT_OUTPUT_FILE,
    ) -> None:
        if payload_dir is None:
            self.payload_root: Traversable = resources.files("webhook_flow")
        else:
            self.payload_root = Path(payload_dir).expanduser().resolve()

        self.output_file = Path(output_file)

    def _get_resource(self, path: str) -> Traversable:
        resource = self.payload_root
        for part in path.split("/"):
            resource = resource.joinpath(part)
        return resource

    def load(self, choice: PayloadChoice) -> str:
        """Load a payload by choice, trimmed of surrounding whitespace."""
        path = choice.resource_path
        resource = self._get_resource(path)

        if not resource.is_file():
            raise PayloadUnavailableError(f"Missing payload resource: {path}")

        content = resource.read_text(encoding="utf-8").strip()
        if not content:
            raise PayloadUnavailableError(f"Empty payload resource: {path}")

        return content

    def save(self, content: str) -> Path:
        """Overwrite the output file with the trimmed payload."""
        self.output_file.parent.mkdir(parents=True, exist_ok=True)
        self.output_file.write_text(content.strip(), encoding="utf-8", newline="")
        return self.output_file
