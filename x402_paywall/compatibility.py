from .models import PaymentRequirement
from .registry import NetworkRegistry


def compatible(
        requirements: list[PaymentRequirement],
        active_short_name: str,
        registry: NetworkRegistry,
) -> list[PaymentRequirement]:
    """
    :return: Requirements payable on the active network, in input order.
        Empty if the active network is unknown to the registry.
    """
    if not requirements:
        return []

    chain_id = registry.chain_id_for(active_short_name)
    if chain_id is None:
        return []

    return [requirement for requirement in requirements if requirement.network_id == chain_id]
