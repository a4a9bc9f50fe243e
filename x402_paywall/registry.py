"""Network registry: the single source of truth for supported chains.

The registry is built once at startup (``load_registry``) and handed to every
component that needs to map a short network name to a chain ID or back.
"""
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, Mapping

from pydantic import ValidationError

from ._paths import SCRIPT_DIR
from .exceptions import ConfigurationError, UnsupportedNetwork
from .models import NetworkInfo
from .utils.file import load_toml

logger = logging.getLogger(__name__)

NETWORKS_FILEPATH = SCRIPT_DIR / "networks.toml"
RPC_ENV_PREFIX = "X402_PAYWALL_RPC_"


class NetworkRegistry:
    def __init__(self, networks: Iterable[NetworkInfo]):
        self._networks: dict[str, NetworkInfo] = {}
        self._chain_id_to_short_name: dict[str, str] = {}
        for network in networks:
            if network.short_name in self._networks:
                raise ConfigurationError(f"Duplicate network short name: {network.short_name}")
            chain_id = str(network.chain_id)
            if chain_id in self._chain_id_to_short_name:
                raise ConfigurationError(
                    f"Chain ID {chain_id} is declared by both"
                    f" {self._chain_id_to_short_name[chain_id]} and {network.short_name}")
            self._networks[network.short_name] = network
            self._chain_id_to_short_name[chain_id] = network.short_name
        if not self._networks:
            raise ConfigurationError("Network registry is empty")

    def __repr__(self):
        return f"{self.__class__.__name__}(short_names={self.short_names})"

    def __iter__(self) -> Iterator[NetworkInfo]:
        return iter(self._networks.values())

    def __len__(self) -> int:
        return len(self._networks)

    def __contains__(self, short_name: object) -> bool:
        return short_name in self._networks

    @classmethod
    def from_data(cls, data: Mapping) -> "NetworkRegistry":
        try:
            networks = [NetworkInfo(**network_data) for network_data in data.get("network", [])]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid network table: {e}") from e
        return cls(networks)

    @classmethod
    def from_toml(cls, filepath: Path | str) -> "NetworkRegistry":
        return cls.from_data(load_toml(filepath))

    @property
    def short_names(self) -> list[str]:
        return list(self._networks)

    @property
    def default(self) -> NetworkInfo:
        return next(iter(self._networks.values()))

    def find(self, short_name: str) -> NetworkInfo | None:
        return self._networks.get(short_name)

    def get(self, short_name: str) -> NetworkInfo:
        network = self.find(short_name)
        if network is None:
            raise UnsupportedNetwork(
                f"Unsupported network '{short_name}'. Supported networks: {', '.join(self.short_names)}")
        return network

    def chain_id_for(self, short_name: str) -> str | None:
        """
        :return: Chain ID as a decimal string, or None for an unknown short name
        """
        network = self._networks.get(short_name)
        return str(network.chain_id) if network else None

    def short_name_for(self, chain_id: int | str) -> str | None:
        return self._chain_id_to_short_name.get(str(chain_id))

    def with_rpc_overrides(self, rpc_overrides: Mapping[str, str]) -> "NetworkRegistry":
        for short_name in rpc_overrides:
            if short_name not in self._networks:
                raise UnsupportedNetwork(f"Cannot override RPC of unknown network '{short_name}'")

        networks = []
        for network in self:
            if network.short_name in rpc_overrides:
                logger.debug("Overriding RPC of %s", network.short_name)
                network = network.model_copy(update={"rpc": rpc_overrides[network.short_name]})
            networks.append(network)
        return self.__class__(networks)


def rpc_overrides_from_env(short_names: Iterable[str], environ: Mapping[str, str] = None) -> dict[str, str]:
    """
    Reads ``X402_PAYWALL_RPC_<SHORT_NAME>`` variables, e.g. ``X402_PAYWALL_RPC_BSC_TESTNET``.
    """
    environ = os.environ if environ is None else environ
    overrides = {}
    for short_name in short_names:
        env_name = RPC_ENV_PREFIX + short_name.upper().replace("-", "_")
        if environ.get(env_name):
            overrides[short_name] = environ[env_name]
    return overrides


def load_registry(
        filepath: Path | str = None,
        rpc_overrides: Mapping[str, str] = None,
) -> NetworkRegistry:
    registry = NetworkRegistry.from_toml(filepath or NETWORKS_FILEPATH)
    if rpc_overrides:
        registry = registry.with_rpc_overrides(rpc_overrides)
    return registry
