from core.contract_calls import CallDescriptor, call
from core.multicall import CallFailure, Multicaller, multicall
from core.scoring import StrategyDescriptor, get_scores, is_strategy_active
from core.space_registry import get_space, get_space_exist, resolve_registry

__all__ = [
    'CallDescriptor', 'call',
    'CallFailure', 'Multicaller', 'multicall',
    'StrategyDescriptor', 'get_scores', 'is_strategy_active',
    'get_space', 'get_space_exist', 'resolve_registry',
]
