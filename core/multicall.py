"""
Multicall batching for read-only contract calls

Encodes N (address, method, args) reads through web3 contract handles,
issues them as one call to the aggregator contract and decodes every raw
result with the output signature of the overload bound at the same
position. All results come from the same block.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

from eth_abi.exceptions import DecodingError, EncodingError
from eth_utils import get_abi_output_types, to_bytes
from web3.exceptions import Web3Exception

from config.settings import Settings
from core.contract_calls import CallDescriptor, split_call_options
from utils.constants import MULTICALL_ABI
from utils.errors import ABIError, DecodeError
from utils.helpers import normalize_address, to_checksum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallFailure:
    """Placeholder for a position whose result could not be decoded"""
    index: int
    method: str
    error: Exception

    def __bool__(self):
        return False


@dataclass(frozen=True)
class EncodedCall:
    """A call ready for the aggregator, with the overload ABI it was bound to"""
    target: str
    data: bytes
    fn_abi: Dict


# ============= Per-call Encode / Decode =============

def encode_call(w3, abi: List[Dict], call: Union[CallDescriptor, Sequence]) -> EncodedCall:
    """
    Bind one call to its contract function and encode its call data

    web3 picks the overload from the argument types, so same-name methods
    in one fragment are fine.
    """
    descriptor = CallDescriptor.coerce(call)
    target = normalize_address(descriptor.target)
    contract = w3.eth.contract(address=to_checksum(target), abi=abi)
    try:
        function = contract.functions[descriptor.method](*descriptor.args)
        data = to_bytes(hexstr=function._encode_transaction_data())
    except (Web3Exception, EncodingError, TypeError, ValueError) as e:
        raise ABIError(f"Cannot encode {descriptor.method} with {descriptor.args!r}: {e}") from e
    return EncodedCall(target, data, function.abi)


def decode_result(w3, fn_abi: Dict, raw: bytes, index: int = None) -> Tuple:
    """Decode one raw return payload with its own overload's outputs"""
    try:
        return tuple(w3.codec.decode(get_abi_output_types(fn_abi), bytes(raw)))
    except (DecodingError, TypeError, ValueError) as e:
        position = f" at position {index}" if index is not None else ""
        raise DecodeError(
            f"Cannot decode result of {fn_abi['name']}{position}: {e}",
            index=index,
            method=fn_abi['name'],
        ) from e


# ============= Aggregate =============

async def aggregate_calls(network: str, w3, encoded_calls: Sequence[EncodedCall],
                          options: Optional[Dict[str, Any]] = None) -> Tuple[int, List[bytes]]:
    """
    Run encoded calls through the network's aggregator in one eth_call

    Returns:
        Block number and one raw payload per call, in submission order
    """
    aggregator = w3.eth.contract(
        address=to_checksum(Settings.get_multicall_address(network)),
        abi=MULTICALL_ABI,
    )
    transaction, block_identifier = split_call_options(options)
    payload = [(to_checksum(call.target), call.data) for call in encoded_calls]

    kwargs = {}
    if block_identifier is not None:
        kwargs['block_identifier'] = block_identifier

    block_number, return_data = await aggregator.functions.aggregate(payload).call(
        transaction or None, **kwargs
    )
    if len(return_data) != len(encoded_calls):
        raise DecodeError(
            f"Aggregate returned {len(return_data)} results for {len(encoded_calls)} calls",
            method='aggregate',
        )
    return block_number, list(return_data)


# ============= Batch =============

async def multicall(network: str, w3, abi: List[Dict],
                    calls: Sequence[Union[CallDescriptor, Sequence]],
                    options: Optional[Dict[str, Any]] = None,
                    allow_failure: bool = False) -> List[Any]:
    """
    Run many view calls in one aggregator round trip

    Args:
        network: Network id selecting the aggregator deployment
        w3: AsyncWeb3 connection
        abi: ABI fragment covering every method in ``calls``
        calls: CallDescriptors or (address, method, args) sequences
        options: block_identifier / blockTag plus transaction overrides
        allow_failure: put a CallFailure at positions that fail to decode
            instead of failing the whole batch

    Returns:
        Decoded output tuples, one per call, in submission order

    Raises:
        UnsupportedNetworkError: no aggregator on ``network``
        ABIError: a call cannot be encoded against ``abi``
        DecodeError: a result does not match its method's outputs
    """
    Settings.get_multicall_address(network)
    encoded_calls = [encode_call(w3, abi, call) for call in calls]
    if not encoded_calls:
        return []

    block_number, return_data = await aggregate_calls(network, w3, encoded_calls, options)
    logger.debug(f"multicall on {network}: {len(encoded_calls)} calls at block {block_number}")

    results = []
    for index, (encoded, payload) in enumerate(zip(encoded_calls, return_data)):
        try:
            results.append(decode_result(w3, encoded.fn_abi, payload, index))
        except DecodeError as e:
            if not allow_failure:
                raise
            logger.warning(f"multicall position {index} failed: {e}")
            results.append(CallFailure(index, encoded.fn_abi['name'], e))
    return results


class Multicaller:
    """
    Accumulates calls under dotted result paths and runs them as one batch

    Usage:
        multi = Multicaller('128', w3, ERC20_ABI, {'blockTag': 1234})
        multi.call('balances.alice', token, 'balanceOf', [alice])
        multi.call('supply', token, 'totalSupply')
        result = await multi.execute()
    """

    def __init__(self, network: str, w3, abi: List[Dict], options: Optional[Dict[str, Any]] = None):
        self.network = network
        self.w3 = w3
        self.abi = abi
        self.options = options or {}
        self.calls: List[CallDescriptor] = []
        self.paths: List[str] = []

    def call(self, path: str, address: str, method: str, args: Sequence = ()) -> 'Multicaller':
        self.calls.append(CallDescriptor(address, method, tuple(args)))
        self.paths.append(path)
        return self

    async def execute(self, into: Optional[Dict] = None) -> Dict:
        """Run the pending calls and store each result at its path"""
        obj = into if into is not None else {}
        results = await multicall(self.network, self.w3, self.abi, self.calls, self.options)
        for path, result in zip(self.paths, results):
            _set_path(obj, path, result[0] if len(result) == 1 else result)
        self.calls = []
        self.paths = []
        return obj


def _set_path(obj: Dict, path: str, value: Any) -> None:
    keys = path.split('.')
    for key in keys[:-1]:
        obj = obj.setdefault(key, {})
    obj[keys[-1]] = value
