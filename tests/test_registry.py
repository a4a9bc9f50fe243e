import pytest

from x402_paywall.exceptions import ConfigurationError, UnsupportedNetwork
from x402_paywall.models import NetworkInfo
from x402_paywall.registry import NetworkRegistry, load_registry, rpc_overrides_from_env


def test_declaration_order(registry):
    assert registry.short_names == ["bsc", "base", "polygon", "sei", "ethereum", "arbitrum", "bsc-testnet"]
    assert registry.default.short_name == "bsc"


@pytest.mark.parametrize(
    "short_name, chain_id",
    [
        ("bsc", "56"),
        ("base", "8453"),
        ("polygon", "137"),
        ("sei", "1329"),
        ("bsc-testnet", "97"),
    ],
)
def test_chain_id_for(registry, short_name, chain_id):
    assert registry.chain_id_for(short_name) == chain_id
    assert registry.short_name_for(chain_id) == short_name
    assert registry.short_name_for(int(chain_id)) == short_name


def test_unknown_names(registry):
    assert registry.chain_id_for("solana") is None
    assert registry.short_name_for("999999") is None
    assert registry.find("solana") is None
    assert "solana" not in registry
    with pytest.raises(UnsupportedNetwork, match="bsc, base"):
        registry.get("solana")


def test_network_metadata(registry):
    bsc = registry.get("bsc")
    assert bsc.name == "Binance Smart Chain"
    assert bsc.icon == "networks/bsc.svg"
    assert bsc.native_currency.symbol == "BNB"
    assert registry.get("bsc-testnet").is_testnet


def test_rpc_overrides(registry):
    overridden = registry.with_rpc_overrides({"bsc": "https://bsc.example.org"})
    assert overridden.get("bsc").rpc == "https://bsc.example.org"
    assert overridden.get("base").rpc == registry.get("base").rpc
    assert registry.get("bsc").rpc != "https://bsc.example.org"
    assert overridden.short_names == registry.short_names

    with pytest.raises(UnsupportedNetwork):
        registry.with_rpc_overrides({"solana": "https://solana.example.org"})


def test_rpc_overrides_from_env(registry):
    environ = {
        "X402_PAYWALL_RPC_BSC_TESTNET": "https://testnet.example.org",
        "X402_PAYWALL_RPC_BASE": "",
        "UNRELATED": "x",
    }
    assert rpc_overrides_from_env(registry.short_names, environ) == {"bsc-testnet": "https://testnet.example.org"}


def test_load_registry_with_overrides():
    registry = load_registry(rpc_overrides={"sei": "https://sei.example.org"})
    assert registry.get("sei").rpc == "https://sei.example.org"


def test_custom_registry_from_data():
    registry = NetworkRegistry.from_data({
        "network": [
            {"short_name": "local", "chain_id": 31337, "rpc": "http://127.0.0.1:8545", "name": "Anvil"},
        ]
    })
    assert registry.chain_id_for("local") == "31337"
    assert len(registry) == 1


def test_duplicates_are_rejected():
    first = NetworkInfo(short_name="a", chain_id=1, rpc="http://a", name="A")
    with pytest.raises(ConfigurationError):
        NetworkRegistry([first, first.model_copy(update={"chain_id": 2})])
    with pytest.raises(ConfigurationError):
        NetworkRegistry([first, first.model_copy(update={"short_name": "b"})])


def test_invalid_table():
    with pytest.raises(ConfigurationError):
        NetworkRegistry.from_data({"network": [{"short_name": "broken"}]})
    with pytest.raises(ConfigurationError):
        NetworkRegistry.from_data({})
