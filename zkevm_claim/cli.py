from __future__ import annotations

import asyncio
import json
import sys
from typing import Any

import click
from loguru import logger

from zkevm_claim.core.claims import NoClaimableDepositError, fetch_claim_params
from zkevm_claim.core.clients.BridgeClient import BridgeClient
from zkevm_claim.core.config import load_config, verbose_from_env


def _echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


async def _run(
    account: str,
    *,
    base_url: str | None,
    offset: int | None,
    limit: int | None,
    verbose: bool,
) -> str:
    client = BridgeClient(base_url=base_url)
    try:
        return await fetch_claim_params(
            account,
            client=client,
            offset=offset,
            limit=limit,
            on_response=_echo_json if verbose else None,
        )
    finally:
        await client.aclose()


@click.command(
    name="zkevm-claim",
    help="Print the ABI-encoded claim arguments for the first claimable deposit of ACCOUNT.",
)
@click.argument("account")
@click.option(
    "--base-url",
    default=None,
    help="Bridge service URL (default: bridge.api_base_url in config.json).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config JSON (default: config.json in the project root).",
)
@click.option("--offset", type=click.IntRange(min=0), default=None)
@click.option("--limit", type=click.IntRange(min=1), default=None)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Echo raw API responses (also enabled by the VERBOSE env var).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
)
def claim_cli(
    account: str,
    base_url: str | None,
    config_path: str | None,
    offset: int | None,
    limit: int | None,
    verbose: bool,
    log_level: str,
) -> None:
    logger.remove()
    logger.add(sys.stderr, level=str(log_level).upper())

    load_config(config_path, require_exists=config_path is not None)

    try:
        encoded = asyncio.run(
            _run(
                account,
                base_url=base_url,
                offset=offset,
                limit=limit,
                verbose=verbose or verbose_from_env(),
            )
        )
    except NoClaimableDepositError as exc:
        raise click.ClickException(str(exc)) from exc

    click.echo(encoded)


def main() -> None:
    claim_cli(standalone_mode=True)


if __name__ == "__main__":
    main()
