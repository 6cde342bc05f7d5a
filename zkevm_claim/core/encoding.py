from __future__ import annotations

from typing import Any

from eth_abi import encode as abi_encode

from zkevm_claim.core.clients.BridgeClient import Deposit, MerkleProof
from zkevm_claim.core.constants.base import MERKLE_TREE_DEPTH
from zkevm_claim.core.constants.bridge_abi import CLAIM_PARAMS_ABI, CLAIM_PARAMS_TYPES
from zkevm_claim.core.utils.abi_caster import cast_args


def build_claim_args(deposit: Deposit, proof: MerkleProof) -> list[Any]:
    """Assemble the claim argument tuple in contract order, cast to ABI types."""
    smt_proof = proof["merkle_proof"]
    if len(smt_proof) != MERKLE_TREE_DEPTH:
        raise ValueError(
            f"Merkle proof must have {MERKLE_TREE_DEPTH} siblings, got {len(smt_proof)}"
        )

    raw = [
        smt_proof,
        deposit["deposit_cnt"],
        proof["main_exit_root"],
        proof["rollup_exit_root"],
        deposit["orig_net"],
        deposit["orig_addr"],
        deposit["dest_net"],
        deposit["dest_addr"],
        deposit["amount"],
        deposit["metadata"],
    ]
    return cast_args(raw, CLAIM_PARAMS_ABI)


def encode_claim_params(deposit: Deposit, proof: MerkleProof) -> bytes:
    return abi_encode(CLAIM_PARAMS_TYPES, build_claim_args(deposit, proof))


def encode_claim_params_hex(deposit: Deposit, proof: MerkleProof) -> str:
    return "0x" + encode_claim_params(deposit, proof).hex()
