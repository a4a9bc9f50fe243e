"""Capability-check tooling around the probe.

Each check gets its own short-lived chain client and a timeout. Probe errors
are reported in ``CapabilityResult.error`` instead of being raised, so one
failing contract never breaks a batch.
"""
import asyncio
import logging
from typing import Callable, Iterable

from better_proxy import Proxy
from web3 import AsyncWeb3

from .chain import Chain
from .exceptions import InvalidContractAddress, ProbeError, UnsupportedNetwork
from .models import CapabilityResult, NetworkInfo
from .probe import CapabilityProbe
from .registry import NetworkRegistry
from .utils.eth import is_contract_address

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30

ChainFactory = Callable[..., AsyncWeb3]


async def check_contract(
        contract_address: str,
        network_name: str,
        registry: NetworkRegistry,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        chain_factory: ChainFactory = Chain.from_network,
        proxy: str | Proxy = None,
        capability_probe: CapabilityProbe = None,
) -> CapabilityResult:
    """
    :raises: InvalidContractAddress, UnsupportedNetwork before any RPC call is made
    """
    if not is_contract_address(contract_address):
        raise InvalidContractAddress(
            f"Invalid contract address format: {contract_address}."
            " Expected a 42-character hex string starting with 0x")
    network: NetworkInfo = registry.get(network_name)
    capability_probe = capability_probe or CapabilityProbe()

    chain = chain_factory(network, proxy=proxy)
    logger.info("Checking %s on %s", contract_address, network.short_name)
    try:
        supported = await asyncio.wait_for(capability_probe.probe(chain, contract_address), timeout)
    except ProbeError as e:
        return CapabilityResult(
            supported=False, contract_address=contract_address, network_name=network.short_name, error=str(e))
    except asyncio.TimeoutError:
        return CapabilityResult(
            supported=False,
            contract_address=contract_address,
            network_name=network.short_name,
            error=f"Probe timed out after {timeout}s",
        )
    finally:
        # Closes the aiohttp session cached by the provider
        await chain.provider.disconnect()
    return CapabilityResult(supported=supported, contract_address=contract_address, network_name=network.short_name)


async def check_contracts(
        targets: Iterable[tuple[str, str]],  # (contract address, network short name)
        registry: NetworkRegistry,
        *,
        concurrency: int = None,
        **check_kwargs,
) -> list[CapabilityResult]:
    """Runs checks concurrently, results are in target order.

    Invalid targets are reported as unsupported with an error, like probe failures.
    """
    semaphore = asyncio.Semaphore(concurrency) if concurrency else None

    async def _check(contract_address: str, network_name: str) -> CapabilityResult:
        try:
            if semaphore is None:
                return await check_contract(contract_address, network_name, registry, **check_kwargs)
            async with semaphore:
                return await check_contract(contract_address, network_name, registry, **check_kwargs)
        except (InvalidContractAddress, UnsupportedNetwork) as e:
            return CapabilityResult(
                supported=False, contract_address=contract_address, network_name=network_name, error=str(e))

    return list(await asyncio.gather(*(_check(address, network) for address, network in targets)))
