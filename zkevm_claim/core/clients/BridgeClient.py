from __future__ import annotations

import time
from typing import Any, NotRequired, Required, TypedDict

import httpx
from loguru import logger

from zkevm_claim.core.config import get_bridge_api_base_url, get_http_timeout


class Deposit(TypedDict):
    leaf_type: NotRequired[int]
    orig_net: Required[int]
    orig_addr: Required[str]
    amount: Required[str]
    dest_net: Required[int]
    dest_addr: Required[str]
    block_num: NotRequired[str]
    deposit_cnt: Required[int | str]
    network_id: Required[int]
    tx_hash: NotRequired[str]
    claim_tx_hash: Required[str]
    metadata: Required[str]
    ready_for_claim: Required[bool]
    global_index: NotRequired[str]


class MerkleProof(TypedDict):
    merkle_proof: Required[list[str]]
    rollup_merkle_proof: NotRequired[list[str]]
    main_exit_root: Required[str]
    rollup_exit_root: Required[str]


class BridgeClient:
    def __init__(
        self,
        *,
        base_url: str | None = None,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_url = str(base_url or get_bridge_api_base_url()).rstrip("/")
        if timeout is None:
            timeout = get_http_timeout()
        self.client = client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _get_json(
        self, url: str, *, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        logger.debug(f"Making GET request to {url}")
        start_time = time.time()

        resp = await self.client.get(url, params=params)

        elapsed = time.time() - start_time
        if resp.status_code >= 400:
            logger.warning(
                f"HTTP {resp.status_code} response for GET {url} after {elapsed:.2f}s"
            )
        else:
            logger.debug(
                f"HTTP {resp.status_code} response for GET {url} after {elapsed:.2f}s"
            )

        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError("Bridge API returned unexpected response type")
        return data

    async def get_bridges(
        self,
        account: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        """Raw payload of the deposits endpoint for ``account``."""
        params: dict[str, Any] = {}
        if offset is not None:
            params["offset"] = int(offset)
        if limit is not None:
            params["limit"] = int(limit)
        url = f"{self.base_url}/bridges/{account}"
        return await self._get_json(url, params=params or None)

    async def get_deposits(
        self,
        account: str,
        *,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[Deposit]:
        data = await self.get_bridges(account, offset=offset, limit=limit)
        return list(data.get("deposits") or [])

    async def get_proof_response(
        self, deposit_cnt: int | str, net_id: int
    ) -> dict[str, Any]:
        """Raw payload of the merkle-proof endpoint."""
        url = f"{self.base_url}/merkle-proof"
        params = {"deposit_cnt": deposit_cnt, "net_id": net_id}
        return await self._get_json(url, params=params)

    async def get_merkle_proof(
        self, deposit_cnt: int | str, net_id: int
    ) -> MerkleProof:
        data = await self.get_proof_response(deposit_cnt, net_id)
        return data["proof"]
