from zkevm_claim.core.clients.BridgeClient import BridgeClient, Deposit, MerkleProof

__all__ = [
    "BridgeClient",
    "Deposit",
    "MerkleProof",
]
