from __future__ import annotations

from typing import Any
from unittest.mock import patch

import httpx
import pytest

from zkevm_claim.core.clients.BridgeClient import BridgeClient

FAKE_BRIDGE_URL = "https://bridge.test"


def make_deposit(**overrides: Any) -> dict[str, Any]:
    deposit: dict[str, Any] = {
        "leaf_type": 0,
        "orig_net": 0,
        "orig_addr": "0x0000000000000000000000000000000000000000",
        "amount": "1000000000000000000",
        "dest_net": 1,
        "dest_addr": "0x1111111111111111111111111111111111111111",
        "block_num": "18000000",
        "deposit_cnt": 7,
        "network_id": 0,
        "tx_hash": "0x" + "cc" * 32,
        "claim_tx_hash": "",
        "metadata": "0x",
        "ready_for_claim": True,
    }
    deposit.update(overrides)
    return deposit


def make_proof(**overrides: Any) -> dict[str, Any]:
    proof: dict[str, Any] = {
        "merkle_proof": ["0x" + f"{i:064x}" for i in range(32)],
        "rollup_merkle_proof": ["0x" + "00" * 32 for _ in range(32)],
        "main_exit_root": "0x" + "aa" * 32,
        "rollup_exit_root": "0x" + "bb" * 32,
    }
    proof.update(overrides)
    return proof


class FakeBridgeApi:
    """In-memory bridge service served through ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.deposits: dict[str, list[dict[str, Any]]] = {}
        self.proofs: dict[tuple[str, str], dict[str, Any]] = {}
        self.requests: list[httpx.Request] = []

    def add_deposits(self, account: str, deposits: list[dict[str, Any]]) -> None:
        self.deposits.setdefault(account, []).extend(deposits)

    def add_proof(self, deposit_cnt: int, net_id: int, proof: dict[str, Any]) -> None:
        self.proofs[(str(deposit_cnt), str(net_id))] = proof

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith("/bridges/"):
            deposits = self.deposits.get(path.removeprefix("/bridges/"), [])
            return httpx.Response(
                200, json={"deposits": deposits, "total_cnt": str(len(deposits))}
            )
        if path == "/merkle-proof":
            key = (
                request.url.params.get("deposit_cnt", ""),
                request.url.params.get("net_id", ""),
            )
            if key not in self.proofs:
                return httpx.Response(404, json={"code": 1, "message": "not found"})
            return httpx.Response(200, json={"proof": self.proofs[key]})
        return httpx.Response(404, json={"code": 1, "message": "unknown route"})

    def client(self, **kwargs: Any) -> BridgeClient:
        kwargs.setdefault("base_url", FAKE_BRIDGE_URL)
        http = httpx.AsyncClient(transport=httpx.MockTransport(self.handler))
        return BridgeClient(client=http, **kwargs)


@pytest.fixture
def bridge_api():
    api = FakeBridgeApi()
    with patch(
        "zkevm_claim.cli.BridgeClient",
        side_effect=lambda base_url=None, **_: api.client(base_url=base_url),
    ):
        yield api
