from zkevm_claim.core.claims import (
    NoClaimableDepositError,
    claimable_deposits,
    fetch_claim_params,
    find_claimable_deposit,
)
from zkevm_claim.core.encoding import (
    build_claim_args,
    encode_claim_params,
    encode_claim_params_hex,
)

__all__ = [
    "NoClaimableDepositError",
    "build_claim_args",
    "claimable_deposits",
    "encode_claim_params",
    "encode_claim_params_hex",
    "fetch_claim_params",
    "find_claimable_deposit",
]
