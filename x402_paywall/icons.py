"""Symbolic icon references. The presentation layer resolves them to assets."""

COIN_ICONS: dict[str, str] = {
    "BNB": "coins/bnb.svg",
    "USDC": "coins/usdc.svg",
    "USDT": "coins/usdt.svg",
    "ETH": "coins/eth.svg",
    "POL": "coins/pol.svg",
    "SEI": "coins/sei.svg",
    # Test token, shown with the USDT icon
    "TESTU": "coins/usdt.svg",
}

WALLET_ICONS: dict[str, str] = {
    "metamask": "wallets/metamask.svg",
    "phantom": "wallets/phantom.svg",
    "walletconnect": "wallets/walletConnect.svg",
}


def coin_icon(token_symbol: str | None) -> str:
    if not token_symbol:
        return ""
    return COIN_ICONS.get(token_symbol.upper(), "")


def wallet_icon(wallet_id: str | None) -> str:
    if not wallet_id:
        return ""
    return WALLET_ICONS.get(wallet_id.lower(), "")
