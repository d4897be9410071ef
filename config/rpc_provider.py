"""
RPC Provider Utility

Provides one AsyncWeb3 connection per supported network id.

Usage:
    from config.rpc_provider import RPCProvider

    w3 = RPCProvider.get_provider('128')
    block = await w3.eth.block_number
"""

import logging
from typing import Dict

import aiohttp
from web3 import AsyncHTTPProvider, AsyncWeb3

from config.settings import Settings

logger = logging.getLogger(__name__)


class RPCProvider:
    """
    Centralized provider cache keyed by network id

    Connections are created lazily and reused for the life of the process.
    """

    _providers: Dict[str, AsyncWeb3] = {}

    @classmethod
    def get_provider(cls, network: str) -> AsyncWeb3:
        """
        Get the AsyncWeb3 connection for a network

        Args:
            network: Network id (e.g., '128', '256')

        Returns:
            AsyncWeb3: connection bound to the network's RPC URL

        Raises:
            UnsupportedNetworkError: network has no configuration
        """
        network = str(network)
        w3 = cls._providers.get(network)
        if w3 is None:
            config = Settings.get_network_config(network)
            request_kwargs = {'timeout': aiohttp.ClientTimeout(total=Settings.REQUEST_TIMEOUT)}
            w3 = AsyncWeb3(AsyncHTTPProvider(config.rpc_url, request_kwargs=request_kwargs))
            cls._providers[network] = w3
            logger.debug(f"Created provider for {config.name} ({network}): {config.rpc_url}")
        return w3

    @classmethod
    def reset(cls) -> None:
        """Drop cached connections"""
        cls._providers.clear()
