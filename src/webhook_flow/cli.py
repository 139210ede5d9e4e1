"""Command line interface for webhook-flow."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from colorama import init, Fore, Style
from pydantic import ValidationError

from webhook_flow.config import DEFAULT_AUTH_PREFIX, DEFAULT_OUTPUT_FILE, ENV_PREFIX, FlowConfig
from webhook_flow.flow import FlowRunner
from webhook_flow.models import PayloadChoice
from webhook_flow.selection import select_payload, trailing_digits

init(autoreset=True)


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.group()
@click.version_option(version="0.1.0", prog_name="webhook-flow")
def cli() -> None:
    """Generate a webhook, select a payload and submit it."""
    pass


@cli.command()
@click.option("--name", "-n", required=True, envvar=f"{ENV_PREFIX}NAME", help="Candidate name")
@click.option("--reg-no", "-r", required=True, envvar=f"{ENV_PREFIX}REG_NO", help="Registration number")
@click.option("--email", "-e", required=True, envvar=f"{ENV_PREFIX}EMAIL", help="Email address")
@click.option("--generate-url", required=True, envvar=f"{ENV_PREFIX}GENERATE_URL", help="Webhook generation endpoint")
@click.option("--fallback-url", default="", envvar=f"{ENV_PREFIX}FALLBACK_URL", help="Submission URL used when none is issued")
@click.option("--auth-prefix", default=DEFAULT_AUTH_PREFIX, envvar=f"{ENV_PREFIX}AUTH_PREFIX", help="Authorization header prefix (e.g. 'Bearer ')")
@click.option("--output", "-o", type=click.Path(path_type=Path), default=DEFAULT_OUTPUT_FILE, envvar=f"{ENV_PREFIX}OUTPUT_FILE", help="File the selected payload is written to")
@click.option("--payload-dir", type=click.Path(path_type=Path), envvar=f"{ENV_PREFIX}PAYLOAD_DIR", help="Directory holding sql/q1.sql and sql/q2.sql")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--json", "-j", "output_json", is_flag=True, help="Output the submission result as JSON")
def run(
    name: str,
    reg_no: str,
    email: str,
    generate_url: str,
    fallback_url: str,
    auth_prefix: str,
    output: Path,
    payload_dir: Path | None,
    verbose: bool,
    output_json: bool,
) -> None:
    """Run the webhook flow once."""
    setup_logging(verbose)

    try:
        config = FlowConfig(
            generate_url=generate_url,
            fallback_submit_url=fallback_url,
            auth_prefix=auth_prefix,
            output_file=output,
            payload_dir=payload_dir,
        )
    except ValidationError as e:
        click.echo(f"{Fore.RED}Error: {e}", err=True)
        sys.exit(1)

    result = FlowRunner(config).run_flow(name, reg_no, email)

    if result is None:
        click.echo(f"{Fore.RED}✗ Flow failed, see log for details", err=True)
        sys.exit(1)

    if output_json:
        click.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    color = Fore.GREEN if result.success else Fore.YELLOW
    click.echo(f"{color}✓ Submitted: status {result.status_code}")
    click.echo(f"  Output:     {config.output_file}")
    if result.authorization_prefix:
        click.echo(f"  Auth:       {result.authorization_prefix.strip()}")
    if result.body is not None:
        click.echo(f"  Response:   {json.dumps(result.body, ensure_ascii=False)}")


@cli.command()
@click.argument("reg_no")
@click.option("--json", "-j", "output_json", is_flag=True, help="Output as JSON")
def select(reg_no: str, output_json: bool) -> None:
    """Show which payload a registration number selects."""
    try:
        choice = select_payload(reg_no)
    except ValueError as e:
        click.echo(f"{Fore.RED}Error: {e}", err=True)
        sys.exit(1)

    digits = trailing_digits(reg_no)

    if output_json:
        click.echo(json.dumps({
            "registration_number": reg_no,
            "digits": digits,
            "payload": choice.value,
            "resource": choice.resource_path,
        }, indent=2))
    else:
        parity = "odd" if choice is PayloadChoice.A else "even"
        click.echo(f"{Style.BRIGHT}Registration: {reg_no}{Style.RESET_ALL}")
        click.echo(f"  Digits:     {digits} ({parity})")
        click.echo(f"  Payload:    {choice.value}")
        click.echo(f"  Resource:   {choice.resource_path}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
