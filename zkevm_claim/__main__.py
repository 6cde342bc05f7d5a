"""Entry point for encoding claim arguments.

Usage:
  poetry run python -m zkevm_claim 0xYourBridgeAccount
"""

from zkevm_claim.cli import main

if __name__ == "__main__":
    main()
