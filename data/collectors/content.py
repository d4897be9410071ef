"""
Content Collector - JSON documents from IPFS gateways and the Fleek bucket
"""

import logging
from typing import Any

from config.settings import Settings
from utils.helpers import fetch_json

logger = logging.getLogger(__name__)


async def ipfs_get(gateway: str, ipfs_hash: str, protocol_type: str = 'ipfs') -> Any:
    """Fetch ``https://{gateway}/{protocol_type}/{ipfs_hash}`` as JSON"""
    url = f"https://{gateway or Settings.IPFS_GATEWAY}/{protocol_type}/{ipfs_hash}"
    logger.debug(f"GET {url}")
    return await fetch_json(url, timeout=Settings.REQUEST_TIMEOUT)


async def fleek_get(address: str, space_id: str) -> Any:
    """Fetch a space document stored under the owner's registry folder"""
    url = f"{Settings.FLEEK_BUCKET_URL}/{address}/{space_id}"
    logger.debug(f"GET {url}")
    return await fetch_json(url, timeout=Settings.REQUEST_TIMEOUT)
