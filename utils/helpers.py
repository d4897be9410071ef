"""
Utility Helper Functions for the Snapshot Scoring Core
Address handling, unit conversion, JSON fetching and schema validation
"""

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional, Union

import aiohttp
from eth_utils import is_hex_address
from jsonschema import Draft7Validator
from web3 import Web3

from utils.errors import ValidationError

logger = logging.getLogger(__name__)

# ============= Web3 Utilities =============

def is_valid_address(address: str) -> bool:
    """Validate address format, ignoring checksum case"""
    return isinstance(address, str) and is_hex_address(address)

def normalize_address(address: str) -> str:
    """Normalize Ethereum address to its canonical lower-case form"""
    if not is_valid_address(address):
        raise ValidationError(f"Invalid address: {address!r}")
    return address.lower()

def to_checksum(address: str) -> str:
    """Checksum an address for web3 contract handles"""
    return Web3.to_checksum_address(normalize_address(address))

def format_token_amount(amount: Union[int, str, Decimal], decimals: int) -> float:
    """Format a raw token amount based on decimals"""
    return float(Decimal(str(amount)) / Decimal(10 ** decimals))

async def get_block_number(w3) -> int:
    """Current head block of the connection"""
    return await w3.eth.block_number

# ============= Network Utilities =============

async def fetch_json(url: str, headers: Optional[Dict] = None,
                     timeout: int = 30) -> Any:
    """Fetch JSON from URL"""
    client_timeout = aiohttp.ClientTimeout(total=timeout)
    async with aiohttp.ClientSession(timeout=client_timeout) as session:
        async with session.get(url, headers=headers) as response:
            response.raise_for_status()
            return await response.json(content_type=None)

# ============= Validation Utilities =============

def validate_schema(schema: Dict, data: Any) -> Union[bool, List[str]]:
    """
    Validate data against a JSON schema

    Returns:
        True when valid, otherwise the list of error messages
    """
    validator = Draft7Validator(schema)
    errors = sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if not errors:
        return True
    return [
        f"{'/'.join(str(p) for p in error.path) or '<root>'}: {error.message}"
        for error in errors
    ]
