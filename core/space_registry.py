"""
Space Registry lookups

A space id's suffix picks the network and registry contract that hold its
record. Both lookups share resolve_registry so they can never disagree.
"""

import logging
from typing import Optional

from config.rpc_provider import RPCProvider
from config.settings import Settings, SpaceRegistryRoute
from core.contract_calls import CallDescriptor, call
from utils.constants import GET_SPACE_ABI, SPACE_EXIST_ABI
from utils.errors import UnsupportedNetworkError

logger = logging.getLogger(__name__)


def resolve_registry(space_id: str) -> SpaceRegistryRoute:
    """Pick the (network, registry address) route for a space id"""
    for route in Settings.SPACE_REGISTRIES:
        if route.matches(space_id):
            return route
    raise UnsupportedNetworkError(space_id, 'space registry')


async def _registry_call(space_id: str, method: str, abi, w3=None):
    route = resolve_registry(space_id)
    if w3 is None:
        w3 = RPCProvider.get_provider(route.network)
    logger.debug(f"{method}({space_id!r}) on network {route.network} registry {route.address}")
    return await call(w3, abi, CallDescriptor(route.address, method, (space_id,)))


async def get_space_exist(space_id: str, w3=None) -> bool:
    """Whether the space is registered"""
    return await _registry_call(space_id, 'spaceExist', SPACE_EXIST_ABI, w3)


async def get_space(space_id: str, w3=None) -> Optional[str]:
    """Owner address registered for the space"""
    return await _registry_call(space_id, 'getSpace', GET_SPACE_ABI, w3)
