"""
Scoring strategy registry

A strategy is an async callable
``(space, network, w3, addresses, params, snapshot) -> {address: score}``
registered under a name. Adding a strategy means registering it here.
"""

import inspect
from typing import Any, Awaitable, Callable, Dict, List

from utils.errors import StrategyError

StrategyFunction = Callable[[str, str, Any, List[str], Dict, Any], Awaitable[Dict[str, float]]]

STRATEGIES: Dict[str, StrategyFunction] = {}


def register_strategy(name: str):
    """Register the decorated coroutine function under ``name``"""
    def decorator(func: StrategyFunction) -> StrategyFunction:
        if name in STRATEGIES:
            raise StrategyError(f"Strategy {name!r} is already registered")
        if not inspect.iscoroutinefunction(func):
            raise StrategyError(f"Strategy {name!r} must be an async function")
        STRATEGIES[name] = func
        return func
    return decorator


def get_strategy(name: str) -> StrategyFunction:
    try:
        return STRATEGIES[name]
    except KeyError:
        raise StrategyError(f"Unknown strategy: {name!r}") from None


# Bundled strategies register themselves on import
from strategies import erc20_balance, eth_balance  # noqa: E402,F401
