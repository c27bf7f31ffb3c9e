import logging
import sys

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import depin_vpn
from script.config import get_signer, get_usdc_address
from script.deploy_mock_usdc import deploy_mock_usdc
from script.verify import verification_command

logger = logging.getLogger(__name__)


def resolve_usdc_address(deployer_address: str) -> str:
    """
    Returns the configured USDC address, deploying and funding a mock token
    when none is configured.
    """
    usdc_address = get_usdc_address()
    if usdc_address is None:
        print("No USDC address provided, deploying MockERC20 as mUSDC...")
        return deploy_mock_usdc(deployer_address).address

    print(f"Using USDC address from environment: {usdc_address}")
    return usdc_address


def deploy_depin_vpn(usdc_address: str) -> VyperContract:
    """
    Deploys the DePinVPN contract wired to a USDC token.

    Returns:
        VyperContract: The deployed DePinVPN contract instance.
    """
    vpn: VyperContract = depin_vpn.deploy(usdc_address)
    print(f"DePinVPN deployed to: {vpn.address}")

    active_network = get_active_network()
    if active_network.has_explorer() and active_network.is_local_or_forked_network() is False:
        result = active_network.moccasin_verify(vpn)
        result.wait_for_verification()
    return vpn


def deploy_all() -> VyperContract:
    """
    Deploys DePinVPN, and a funded mock USDC first when USDC_ADDRESS is unset.

    Returns:
        VyperContract: The deployed DePinVPN contract instance.
    """
    deployer = get_signer()
    print(f"Deploying with: {deployer.address}")

    usdc_address = resolve_usdc_address(deployer.address)
    vpn = deploy_depin_vpn(usdc_address)

    print(f"USDC used: {usdc_address}")
    print("\nTo verify on the block explorer (optional):")
    print(verification_command(get_active_network().name, vpn.address))
    return vpn


def moccasin_main() -> VyperContract:
    """
    Main deployment function for Moccasin framework. Exits with status 1 on any failure.

    Returns:
        VyperContract: The deployed DePinVPN contract instance.
    """
    logging.basicConfig()
    try:
        return deploy_all()
    except Exception:
        logger.exception("Deployment failed")
        sys.exit(1)
