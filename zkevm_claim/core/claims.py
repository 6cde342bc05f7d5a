from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from loguru import logger

from zkevm_claim.core.clients.BridgeClient import BridgeClient, Deposit
from zkevm_claim.core.encoding import encode_claim_params_hex


class NoClaimableDepositError(LookupError):
    def __init__(self, message: str = "No claimable deposit txn found") -> None:
        super().__init__(message)


def is_claimable(deposit: Deposit) -> bool:
    return deposit.get("claim_tx_hash") == "" and deposit.get("ready_for_claim") is True


def claimable_deposits(deposits: Iterable[Deposit]) -> Iterator[Deposit]:
    return (d for d in deposits if is_claimable(d))


def find_claimable_deposit(deposits: Iterable[Deposit]) -> Deposit:
    deposit = next(claimable_deposits(deposits), None)
    if deposit is None:
        raise NoClaimableDepositError()
    return deposit


async def fetch_claim_params(
    account: str,
    *,
    client: BridgeClient,
    offset: int | None = None,
    limit: int | None = None,
    on_response: Callable[[dict[str, Any]], None] | None = None,
) -> str:
    """Find the first claimable deposit of ``account`` and encode its claim args.

    ``on_response`` receives each raw API payload as it arrives.

    Raises:
        NoClaimableDepositError: When no deposit is unclaimed and ready for claim.
        httpx.HTTPError: On network/HTTP issues.
    """
    bridges = await client.get_bridges(account, offset=offset, limit=limit)
    if on_response is not None:
        on_response(bridges)

    deposit = find_claimable_deposit(bridges.get("deposits") or [])
    logger.info(
        f"Selected deposit {deposit['deposit_cnt']} on network {deposit['network_id']}"
    )

    proof_response = await client.get_proof_response(
        deposit["deposit_cnt"], deposit["network_id"]
    )
    if on_response is not None:
        on_response(proof_response)

    return encode_claim_params_hex(deposit, proof_response["proof"])
