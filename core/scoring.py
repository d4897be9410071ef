"""
Score Orchestrator

Fans a list of strategies out over a set of addresses concurrently and
returns one score map per strategy, in input order. A strategy whose
``params.start`` lies after the snapshot block is not active yet: it
scores ``{}`` and is never invoked. Any strategy failure fails the whole
call.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, Dict, List, Optional, Sequence, Union

from strategies import get_strategy
from utils.constants import LATEST

logger = logging.getLogger(__name__)

ScoreSet = Dict[str, float]


@dataclass(frozen=True)
class StrategyDescriptor:
    """Registered strategy name plus its opaque params"""
    name: str
    params: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def coerce(cls, strategy: Union['StrategyDescriptor', Dict]) -> 'StrategyDescriptor':
        if isinstance(strategy, cls):
            return strategy
        return cls(strategy['name'], strategy.get('params') or {})


def _block_height(value: Any) -> Optional[int]:
    """Numeric height of a snapshot or start marker, None if not numeric"""
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return value
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return None


def is_strategy_active(strategy: Union[StrategyDescriptor, Dict], snapshot: Any = LATEST) -> bool:
    """False when the snapshot predates the strategy's ``params.start``"""
    if snapshot == LATEST:
        return True
    strategy = StrategyDescriptor.coerce(strategy)
    start = _block_height(strategy.params.get('start'))
    height = _block_height(snapshot)
    if start is None or height is None:
        return True
    return not start > height


async def _inactive() -> ScoreSet:
    return {}


async def get_scores(space: str, strategies: Sequence[Union[StrategyDescriptor, Dict]],
                     network: str, w3, addresses: List[str],
                     snapshot: Any = LATEST) -> List[ScoreSet]:
    """
    Compute per-address scores for every strategy

    Args:
        space: Space id the scores are for
        strategies: StrategyDescriptors or ``{'name', 'params'}`` dicts
        network: Network id handed to each strategy
        w3: AsyncWeb3 connection handed to each strategy
        addresses: Addresses to score
        snapshot: 'latest' or a block number

    Returns:
        One score map per strategy, aligned with ``strategies``

    Raises:
        StrategyError: a strategy name is not registered
        Exception: whatever the first failing strategy raised
    """
    descriptors = [StrategyDescriptor.coerce(strategy) for strategy in strategies]

    # Resolve every name before launching anything
    plan = []
    for descriptor in descriptors:
        if is_strategy_active(descriptor, snapshot):
            plan.append((descriptor, get_strategy(descriptor.name)))
        else:
            logger.debug(f"{descriptor.name} inactive at {snapshot} (start {descriptor.params.get('start')})")
            plan.append((descriptor, None))

    pending = []
    try:
        for descriptor, func in plan:
            pending.append(
                func(space, network, w3, addresses, descriptor.params, snapshot) if func else _inactive()
            )
    except Exception as e:
        # Nothing is scheduled yet; close the coroutines already created
        for coro in pending:
            if asyncio.iscoroutine(coro):
                coro.close()
        logger.error(f"Scoring {space} failed while starting strategies: {e}")
        raise

    try:
        scores = await asyncio.gather(*pending)
    except Exception as e:
        logger.error(f"Scoring {space} failed: {e}")
        raise
    return list(scores)
