import os

from moccasin.boa_tools import VyperContract
from moccasin.config import get_active_network

from contracts import depin_vpn


def verification_command(network_name: str, vpn_address: str) -> str:
    """Command line that verifies a deployed DePinVPN on the given network"""
    return f"DEPIN_VPN_ADDRESS={vpn_address} mox run verify --network {network_name}"


def verify_depin_vpn(vpn_address: str) -> VyperContract:
    """
    Submits an already deployed DePinVPN contract to the network's block explorer.

    Returns:
        VyperContract: The verified contract instance.
    """
    active_network = get_active_network()
    if not active_network.has_explorer():
        raise ValueError(f"Network {active_network.name} has no explorer configured")

    vpn: VyperContract = depin_vpn.at(vpn_address)
    result = active_network.moccasin_verify(vpn)
    result.wait_for_verification()
    print(f"Verified DePinVPN at {vpn.address}")
    return vpn


def moccasin_main() -> VyperContract:
    """
    Verifies the DePinVPN deployed at DEPIN_VPN_ADDRESS.

    Returns:
        VyperContract: The verified contract instance.
    """
    vpn_address = os.getenv("DEPIN_VPN_ADDRESS")
    if not vpn_address:
        raise ValueError("DEPIN_VPN_ADDRESS is not set")
    return verify_depin_vpn(vpn_address)
