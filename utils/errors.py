"""
Typed Exception Classes for the Snapshot Scoring Core

This module provides specific exception types for the chain-read and
scoring pipeline. Errors raised by web3 or aiohttp are never wrapped in
these; they reach the caller unchanged.
"""


# ============================================================================
# Network & RPC Exceptions
# ============================================================================

class NetworkError(Exception):
    """Base exception for network-related errors"""
    pass


class TransportError(NetworkError):
    """
    RPC or HTTP endpoint failure category

    Never raised here: web3 and aiohttp exceptions reach the caller as they
    were thrown. Callers that wrap their own transports may subclass it.
    """
    pass


class UnsupportedNetworkError(NetworkError):
    """Network id has no registered provider, aggregator or registry"""

    def __init__(self, network: str, table: str = "network"):
        self.network = network
        self.table = table
        super().__init__(f"Unsupported {table}: {network!r}")


# ============================================================================
# Contract & ABI Exceptions
# ============================================================================

class ContractError(Exception):
    """Base exception for smart contract errors"""
    pass


class ABIError(ContractError):
    """ABI lookup or encoding errors"""
    pass


class DecodeError(ContractError):
    """Raw result bytes do not match the expected output signature"""

    def __init__(self, message: str, index: int = None, method: str = None):
        self.index = index
        self.method = method
        super().__init__(message)


# ============================================================================
# Scoring & Validation Exceptions
# ============================================================================

class StrategyError(Exception):
    """Unknown or misconfigured scoring strategy"""
    pass


class ValidationError(Exception):
    """Data validation errors"""
    pass
