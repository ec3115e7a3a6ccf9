from __future__ import annotations

from eth_account import Account
from eth_account.signers.local import LocalAccount
from web3 import Web3


def _deployer(config: dict) -> LocalAccount:
    private_key = config.get("private_key")
    if not private_key:
        raise ValueError("Missing env var: DEPLOYER_PRIVATE_KEY (or PRIVATE_KEY)")
    return Account.from_key(private_key)


def get_named_accounts(config: dict) -> dict[str, str]:
    """Map account names to checksum addresses. Only the deployer is known."""
    return {"deployer": _deployer(config).address}


def get_signer(config: dict, address: str) -> LocalAccount:
    deployer = _deployer(config)
    if deployer.address != Web3.to_checksum_address(address):
        raise LookupError(f"No configured key for account {Web3.to_checksum_address(address)}")
    return deployer
