"""Basic usage example."""

import logging

from webhook_flow import FlowConfig, FlowRunner
from webhook_flow.selection import select_payload


def main():
    logging.basicConfig(level=logging.INFO)

    # Reads WEBHOOK_FLOW_GENERATE_URL, WEBHOOK_FLOW_FALLBACK_URL, ...
    config = FlowConfig.from_env()

    reg_no = "PES1202300001"
    print(f"Payload for {reg_no}: {select_payload(reg_no).value}")

    result = FlowRunner(config).run_flow("John Doe", reg_no, "john@example.com")
    if result is None:
        print("Flow failed, see log")
    else:
        print(f"Submitted with status {result.status_code}")


if __name__ == "__main__":
    main()
