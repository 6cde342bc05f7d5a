__version__ = "0.1.0"

from zkevm_claim.core import (
    NoClaimableDepositError,
    encode_claim_params,
    fetch_claim_params,
    find_claimable_deposit,
)

__all__ = [
    "__version__",
    "NoClaimableDepositError",
    "encode_claim_params",
    "fetch_claim_params",
    "find_claimable_deposit",
]
