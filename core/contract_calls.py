"""
Single read-only contract call

Binds an ABI fragment and address into an AsyncWeb3 contract handle and
invokes one view method. Errors from web3 (transport, revert, ABI lookup)
reach the caller unchanged.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from utils.helpers import to_checksum

logger = logging.getLogger(__name__)

BLOCK_OPTION_KEYS = ('block_identifier', 'blockTag')


@dataclass(frozen=True)
class CallDescriptor:
    """One contract read: target address, method name and positional args"""
    target: str
    method: str
    args: Tuple[Any, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'args', tuple(self.args or ()))

    @classmethod
    def coerce(cls, call: Union['CallDescriptor', Sequence]) -> 'CallDescriptor':
        """Accept a descriptor or an ``(address, method[, args])`` sequence"""
        if isinstance(call, cls):
            return call
        target, method, *rest = call
        return cls(target, method, tuple(rest[0]) if rest and rest[0] else ())


def split_call_options(options: Optional[Dict[str, Any]]) -> Tuple[Dict[str, Any], Any]:
    """Separate the block tag from transaction overrides"""
    transaction = dict(options or {})
    block_identifier = None
    for key in BLOCK_OPTION_KEYS:
        if key in transaction:
            block_identifier = transaction.pop(key)
    return transaction, block_identifier


async def call(w3, abi: List[Dict], call: Union[CallDescriptor, Sequence],
               options: Optional[Dict[str, Any]] = None) -> Any:
    """
    Invoke one view method and return its decoded result

    Args:
        w3: AsyncWeb3 connection
        abi: ABI fragment containing the method
        call: CallDescriptor or (address, method, args)
        options: block_identifier / blockTag plus transaction overrides

    Returns:
        Decoded return value as produced by web3
    """
    descriptor = CallDescriptor.coerce(call)
    contract = w3.eth.contract(address=to_checksum(descriptor.target), abi=abi)
    function = getattr(contract.functions, descriptor.method)
    transaction, block_identifier = split_call_options(options)

    kwargs = {}
    if block_identifier is not None:
        kwargs['block_identifier'] = block_identifier

    logger.debug(f"call {descriptor.method} on {descriptor.target} at {block_identifier or 'latest'}")
    return await function(*descriptor.args).call(transaction or None, **kwargs)
