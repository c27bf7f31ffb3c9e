import pytest
from moccasin.config import get_active_network

from script.deploy_mock_usdc import deploy_mock_usdc

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


def pytest_configure(config):
    # Mirror `mox test` so a plain `pytest` run has an active moccasin network
    from moccasin._sys_path_and_config_setup import (
        _setup_network_and_account_from_config_and_cli,
    )
    from moccasin.config import get_or_initialize_config

    get_or_initialize_config()
    _setup_network_and_account_from_config_and_cli()


@pytest.fixture(scope="session")
def account():
    return get_active_network().get_default_account()


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    # moccasin loads .env, tests set the variables they need explicitly
    for name in ("USDC_ADDRESS", "PRIVATE_KEY", "DEPIN_VPN_ADDRESS"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="function")
def mock_usdc(account):
    return deploy_mock_usdc(account.address)


@pytest.fixture(scope="function")
def no_mock_deploy(monkeypatch):
    """Fails the test if the mock token would be deployed"""

    def _fail(recipient):
        raise AssertionError(f"mock token deployed for {recipient}")

    monkeypatch.setattr("script.deploy.deploy_mock_usdc", _fail)


@pytest.fixture(scope="function")
def vpn_deploy_calls(monkeypatch):
    """Records every DePinVPN constructor call while still deploying"""
    import script.deploy as deploy_module

    calls = []
    real_deployer = deploy_module.depin_vpn

    class RecordingDeployer:
        def deploy(self, *args, **kwargs):
            calls.append((args, kwargs))
            return real_deployer.deploy(*args, **kwargs)

    monkeypatch.setattr(deploy_module, "depin_vpn", RecordingDeployer())
    return calls
