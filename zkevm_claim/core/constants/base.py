# Timeout constants (seconds)
DEFAULT_HTTP_TIMEOUT = 30.0  # HTTP client timeout

DEFAULT_BRIDGE_API_BASE_URL = "https://bridge-api.zkevm-rpc.com"

# Depth of the deposit exit tree; every proof carries one sibling per level.
MERKLE_TREE_DEPTH = 32

MAX_UINT32 = 2**32 - 1
MAX_UINT256 = 2**256 - 1
