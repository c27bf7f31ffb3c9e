import os

import boa
from eth_account import Account
from eth_utils import is_address, to_wei
from moccasin.config import get_active_network

MOCK_USDC_NAME = "Mock USDC"
MOCK_USDC_SYMBOL = "mUSDC"
MOCK_USDC_DECIMALS = 6
MINT_AMOUNT = to_wei(10_000, "mwei")  # 10,000 tokens at 6 decimals


def get_usdc_address() -> str | None:
    """
    Reads the pre-existing USDC token address from USDC_ADDRESS.

    Returns:
        str | None: The address exactly as configured, or None when unset or empty.
    """
    usdc_address = os.getenv("USDC_ADDRESS", "")
    if not usdc_address:
        return None
    if not is_address(usdc_address):
        raise ValueError(f"USDC_ADDRESS is not a valid address: {usdc_address!r}")
    return usdc_address


def get_signer():
    """
    Returns the account that signs and pays for the deployment.

    On live networks a PRIVATE_KEY from the environment takes precedence and
    becomes boa's default sender.
    """
    active_network = get_active_network()
    private_key = os.getenv("PRIVATE_KEY")
    if private_key and active_network.is_local_or_forked_network() is False:
        account = Account.from_key(private_key)
        boa.env.add_account(account, force_eoa=True)
        return account
    return active_network.get_default_account()
