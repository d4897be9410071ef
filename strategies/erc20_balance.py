"""ERC20 token balance as voting weight"""

import logging
from typing import Dict, List

from core.multicall import multicall
from strategies import register_strategy
from utils.constants import ERC20_ABI
from utils.helpers import format_token_amount

logger = logging.getLogger(__name__)


@register_strategy('erc20-balance')
async def erc20_balance(space: str, network: str, w3, addresses: List[str],
                        params: Dict, snapshot) -> Dict[str, float]:
    """
    Params:
        address: token contract
        decimals: token decimals (default 18)
    """
    calls = [(params['address'], 'balanceOf', [address]) for address in addresses]
    logger.debug(f"{space}: balanceOf {params['address']} for {len(calls)} addresses at {snapshot}")
    results = await multicall(network, w3, ERC20_ABI, calls, {'blockTag': snapshot})
    decimals = int(params.get('decimals', 18))
    return {
        address: format_token_amount(result[0], decimals)
        for address, result in zip(addresses, results)
    }
