from .eth import (
    is_contract_address,
    address_url,
    is_empty_data,
)
from .file import load_json, load_toml


__all__ = [
    "is_contract_address",
    "address_url",
    "is_empty_data",
    "load_json",
    "load_toml",
]
