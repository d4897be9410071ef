# tests/conftest.py
"""
Global pytest configuration and fixtures
"""
import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from web3 import AsyncHTTPProvider, AsyncWeb3

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.rpc_provider import RPCProvider
from tests.fixtures.mock_data import USER_1, USER_2, MockChainData
from utils.constants import ERC20_ABI, GET_SPACE_ABI, SPACE_EXIST_ABI


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without network access")


@pytest.fixture
def chain_data():
    return MockChainData


@pytest.fixture
def mock_w3():
    """AsyncWeb3 stand-in; tests set eth.call / contract behaviour"""
    w3 = MagicMock()
    w3.eth.call = AsyncMock()
    w3.eth.get_balance = AsyncMock()
    return w3


@pytest.fixture
def chain_w3():
    """Real AsyncWeb3 whose eth_call is mocked; contract handles encode and decode for real"""
    w3 = AsyncWeb3(AsyncHTTPProvider('http://127.0.0.1:8545'))
    w3.eth.call = AsyncMock()
    return w3


@pytest.fixture
def erc20_abi():
    return ERC20_ABI


@pytest.fixture
def registry_abi():
    return SPACE_EXIST_ABI + GET_SPACE_ABI


@pytest.fixture
def addresses():
    return [USER_1, USER_2]


@pytest.fixture(autouse=True)
def reset_providers():
    RPCProvider.reset()
    yield
    RPCProvider.reset()
