from enum import Enum


class Scheme(str, Enum):
    EXACT = "exact"


class Namespace(str, Enum):
    EVM = "evm"


class AmountFormat(str, Enum):
    HUMAN_READABLE = "humanReadable"
    ATOMIC = "atomic"
