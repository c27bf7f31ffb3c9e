from moccasin.boa_tools import VyperContract

from contracts import mock_erc20
from script.config import MINT_AMOUNT, MOCK_USDC_NAME, MOCK_USDC_SYMBOL, get_signer


def deploy_mock_usdc(recipient: str) -> VyperContract:
    """
    Deploys the mock USDC token and mints the initial test supply.

    Args:
        recipient: Address receiving the minted tokens.

    Returns:
        VyperContract: The deployed MockERC20 contract instance.
    """
    mock_usdc: VyperContract = mock_erc20.deploy(MOCK_USDC_NAME, MOCK_USDC_SYMBOL)
    print(f"MockERC20 deployed at {mock_usdc.address}")
    mock_usdc.mint(recipient, MINT_AMOUNT)
    print(f"Minted {MINT_AMOUNT} {MOCK_USDC_SYMBOL} units to {recipient}")
    return mock_usdc


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework.

    Returns:
        VyperContract: The deployed MockERC20 contract instance.
    """
    return deploy_mock_usdc(get_signer().address)
