"""
System-wide Constants for the Snapshot Scoring Core
Contract ABIs and protocol markers
"""

from typing import Dict, List

# ============= Snapshot Markers =============
LATEST = "latest"

# ============= Contract ABIs =============

# Multicall (v1) aggregator
MULTICALL_ABI: List[Dict] = [
    {
        "constant": False,
        "inputs": [
            {
                "components": [
                    {"internalType": "address", "name": "target", "type": "address"},
                    {"internalType": "bytes", "name": "callData", "type": "bytes"},
                ],
                "internalType": "struct Multicall.Call[]",
                "name": "calls",
                "type": "tuple[]",
            }
        ],
        "name": "aggregate",
        "outputs": [
            {"internalType": "uint256", "name": "blockNumber", "type": "uint256"},
            {"internalType": "bytes[]", "name": "returnData", "type": "bytes[]"},
        ],
        "stateMutability": "nonpayable",
        "type": "function",
    }
]

SPACE_EXIST_ABI: List[Dict] = [
    {
        "inputs": [{"internalType": "string", "name": "name", "type": "string"}],
        "name": "spaceExist",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    }
]

GET_SPACE_ABI: List[Dict] = [
    {
        "inputs": [{"internalType": "string", "name": "name", "type": "string"}],
        "name": "getSpace",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    }
]

ERC20_ABI: List[Dict] = [
    {
        "constant": True,
        "inputs": [{"name": "_owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"name": "balance", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
]
