import re

from eth_typing import ChecksumAddress, HexStr

CONTRACT_ADDRESS_PATTERN = re.compile(r"0x[a-fA-F0-9]{40}")


def is_contract_address(address: str) -> bool:
    """Format check only, the mixed-case checksum is not verified."""
    return isinstance(address, str) and bool(CONTRACT_ADDRESS_PATTERN.fullmatch(address))


def address_url(explorer_url: str, address: ChecksumAddress | str) -> str:
    return f"{explorer_url.rstrip('/')}/address/{address}"


def is_empty_data(data: bytes | HexStr | str | None) -> bool:
    if data is None:
        return True
    if isinstance(data, (bytes, bytearray)):
        return len(data) == 0
    return data in ("", "0x")
