"""Native coin balance as voting weight"""

import asyncio
import logging
from typing import Dict, List

from strategies import register_strategy
from utils.helpers import format_token_amount, to_checksum

logger = logging.getLogger(__name__)


@register_strategy('eth-balance')
async def eth_balance(space: str, network: str, w3, addresses: List[str],
                      params: Dict, snapshot) -> Dict[str, float]:
    decimals = int((params or {}).get('decimals', 18))
    logger.debug(f"{space}: native balances on {network} for {len(addresses)} addresses at {snapshot}")
    balances = await asyncio.gather(*[
        w3.eth.get_balance(to_checksum(address), snapshot) for address in addresses
    ])
    return {
        address: format_token_amount(balance, decimals)
        for address, balance in zip(addresses, balances)
    }
