import logging
from collections import defaultdict

from .enums import Namespace
from .models import NetworkBundle, PaymentRequirement
from .registry import NetworkRegistry
from .requirements import to_coins

logger = logging.getLogger(__name__)


def group_by_namespace(requirements: list[PaymentRequirement]) -> dict[str, list[PaymentRequirement]]:
    groups: dict[str, list[PaymentRequirement]] = defaultdict(list)
    for requirement in requirements:
        groups[requirement.namespace or ""].append(requirement)
    return dict(groups)


def aggregate(requirements: list[PaymentRequirement], registry: NetworkRegistry) -> list[NetworkBundle]:
    """Groups EVM requirements into one bundle per registry network.

    Bundles follow registry declaration order. Requirements of other namespaces
    or with a chain ID unknown to the registry are left out.
    """
    evm_requirements = group_by_namespace(requirements).get(Namespace.EVM.value, [])

    by_short_name: dict[str, list[PaymentRequirement]] = defaultdict(list)
    for requirement in evm_requirements:
        short_name = registry.short_name_for(requirement.network_id)
        if short_name is None:
            logger.debug("Skipping requirement on unknown chain %s", requirement.network_id)
            continue
        by_short_name[short_name].append(requirement)

    bundles = []
    for network in registry:
        network_requirements = by_short_name.get(network.short_name)
        if not network_requirements:
            continue
        bundles.append(NetworkBundle(
            id=network.short_name,
            name=network.name,
            icon=network.icon,
            coins=to_coins(network_requirements),
        ))

    logger.debug("Built %d network bundles from %d requirements", len(bundles), len(requirements))
    return bundles
