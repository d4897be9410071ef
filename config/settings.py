"""
Global Settings for the Snapshot Scoring Core
Process-wide lookup tables for networks, aggregator and registry contracts
"""

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from dotenv import load_dotenv

from utils.errors import UnsupportedNetworkError

load_dotenv()


@dataclass(frozen=True)
class NetworkConfig:
    """Blockchain network configuration"""
    name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    is_testnet: bool = False


@dataclass(frozen=True)
class SpaceRegistryRoute:
    """Space id suffix routed to a (network, registry contract) pair"""
    suffix: Optional[str]
    network: str
    address: str

    def matches(self, space_id: str) -> bool:
        return self.suffix is None or space_id.endswith(self.suffix)


class Settings:
    """Global application settings"""

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # HTTP
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT', '30'))  # seconds

    # Blockchain Networks
    NETWORKS: Dict[str, NetworkConfig] = {
        '128': NetworkConfig(
            name='Heco',
            chain_id=128,
            rpc_url=os.getenv('HECO_RPC_URL', 'https://http-mainnet.hecochain.com'),
            explorer_url='https://hecoinfo.com',
        ),
        '256': NetworkConfig(
            name='Heco Testnet',
            chain_id=256,
            rpc_url=os.getenv('HECO_TESTNET_RPC_URL', 'https://http-testnet.hecochain.com'),
            explorer_url='https://testnet.hecoinfo.com',
            is_testnet=True,
        ),
    }

    # Multicall aggregator deployments
    MULTICALL: Dict[str, str] = {
        '128': '0x37ab26db3df780e7026f3e767f65efb739f48d8e',
        '256': '0xC33994Eb943c61a8a59a918E2de65e03e4e385E0',
    }

    # Space registries, first match wins; the suffix-less route is the default
    SPACE_REGISTRIES: Tuple[SpaceRegistryRoute, ...] = (
        SpaceRegistryRoute('.heco', '128', '0xC403190d6155cd2A44fBe80A09c23cf3707B1B69'),
        SpaceRegistryRoute(None, '256', '0xB14C5711db68081C52C5Bf6825741Bd28B3255d1'),
    )

    SNAPSHOT_SUBGRAPH_URL: Dict[str, str] = {
        '1': 'https://api.thegraph.com/subgraphs/name/snapshot-labs/snapshot',
        '4': 'https://api.thegraph.com/subgraphs/name/snapshot-labs/snapshot-rinkeby',
        '42': 'https://api.thegraph.com/subgraphs/name/snapshot-labs/snapshot-kovan',
    }

    # Content storage
    IPFS_GATEWAY = os.getenv('IPFS_GATEWAY', 'cloudflare-ipfs.com')
    FLEEK_BUCKET_URL = os.getenv(
        'FLEEK_BUCKET_URL',
        'https://fankouzu-team-bucket.storage.fleek.co/registry',
    )

    @classmethod
    def get_network_config(cls, network: str) -> NetworkConfig:
        """Get network configuration, failing fast on unknown ids"""
        config = cls.NETWORKS.get(str(network))
        if config is None:
            raise UnsupportedNetworkError(network, 'network')
        return config

    @classmethod
    def get_multicall_address(cls, network: str) -> str:
        """Get the aggregator contract deployed on a network"""
        address = cls.MULTICALL.get(str(network))
        if address is None:
            raise UnsupportedNetworkError(network, 'multicall network')
        return address

    @classmethod
    def get_subgraph_url(cls, network: str) -> str:
        url = cls.SNAPSHOT_SUBGRAPH_URL.get(str(network))
        if url is None:
            raise UnsupportedNetworkError(network, 'subgraph network')
        return url
