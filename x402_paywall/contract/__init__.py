from .contract import Contract
from .eip3009 import EIP3009

__all__ = [
    "Contract",
    "EIP3009",
]
