# Shared argument head of PolygonZkEVMBridge.claimAsset / claimMessage.
CLAIM_PARAMS_ABI = [
    {"internalType": "bytes32[32]", "name": "smtProof", "type": "bytes32[32]"},
    {"internalType": "uint32", "name": "index", "type": "uint32"},
    {"internalType": "bytes32", "name": "mainnetExitRoot", "type": "bytes32"},
    {"internalType": "bytes32", "name": "rollupExitRoot", "type": "bytes32"},
    {"internalType": "uint32", "name": "originNetwork", "type": "uint32"},
    {"internalType": "address", "name": "originTokenAddress", "type": "address"},
    {"internalType": "uint32", "name": "destinationNetwork", "type": "uint32"},
    {"internalType": "address", "name": "destinationAddress", "type": "address"},
    {"internalType": "uint256", "name": "amount", "type": "uint256"},
    {"internalType": "bytes", "name": "metadata", "type": "bytes"},
]

CLAIM_PARAMS_TYPES = [inp["type"] for inp in CLAIM_PARAMS_ABI]
