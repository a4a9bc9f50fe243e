from .aggregation import aggregate
from .chain import Chain
from .checker import check_contract, check_contracts
from .compatibility import compatible
from .enums import AmountFormat, Namespace, Scheme
from .exceptions import (
    X402PaywallException,
    ConfigurationError,
    UnsupportedNetwork,
    InvalidContractAddress,
    InvalidPaymentRequirement,
    MissingTokenMetadata,
    ProbeError,
    RPCRateLimited,
    NodeStateUnavailable,
)
from .icons import coin_icon, wallet_icon
from .models import (
    CapabilityResult,
    Coin,
    NetworkBundle,
    NetworkInfo,
    PaymentRequirement,
)
from .probe import CapabilityProbe, probe
from .registry import NetworkRegistry, load_registry
from .requirements import normalize, parse_requirements, to_coin, to_coins


__all__ = [
    "aggregate",
    "Chain",
    "check_contract",
    "check_contracts",
    "compatible",
    "AmountFormat",
    "Namespace",
    "Scheme",
    "X402PaywallException",
    "ConfigurationError",
    "UnsupportedNetwork",
    "InvalidContractAddress",
    "InvalidPaymentRequirement",
    "MissingTokenMetadata",
    "ProbeError",
    "RPCRateLimited",
    "NodeStateUnavailable",
    "coin_icon",
    "wallet_icon",
    "CapabilityResult",
    "Coin",
    "NetworkBundle",
    "NetworkInfo",
    "PaymentRequirement",
    "CapabilityProbe",
    "probe",
    "NetworkRegistry",
    "load_registry",
    "normalize",
    "parse_requirements",
    "to_coin",
    "to_coins",
]
