"""Requirement normalization.

A gated resource advertises either one payment requirement or a list of
alternatives. Everything downstream works on a plain list.
"""
from typing import Any, Iterable

from pydantic import ValidationError

from .exceptions import InvalidPaymentRequirement
from .icons import coin_icon
from .models import Coin, PaymentRequirement

MISSING_TOKEN_METADATA = "missing token metadata"


def normalize(
        payment_requirements: PaymentRequirement | Iterable[PaymentRequirement] | None,
) -> list[PaymentRequirement]:
    if payment_requirements is None:
        return []
    if isinstance(payment_requirements, PaymentRequirement):
        return [payment_requirements]
    return list(payment_requirements)


def parse_requirements(payload: dict | list[dict] | None) -> list[PaymentRequirement]:
    """Validates a wire payload (one object, a list of objects or nothing).

    :raises: InvalidPaymentRequirement
    """
    if payload is None:
        return []
    entries: list[Any] = [payload] if isinstance(payload, dict) else list(payload)

    requirements = []
    for index, entry in enumerate(entries):
        if isinstance(entry, PaymentRequirement):
            requirements.append(entry)
            continue
        try:
            requirements.append(PaymentRequirement.model_validate(entry))
        except ValidationError as e:
            raise InvalidPaymentRequirement(f"Invalid payment requirement at index {index}: {e}") from e
    return requirements


def to_coin(requirement: PaymentRequirement) -> Coin:
    token_symbol = requirement.token_symbol or MISSING_TOKEN_METADATA
    return Coin(
        id=requirement.token_address or "",
        name=token_symbol,
        icon=coin_icon(requirement.token_symbol),
        payment_requirement=requirement,
    )


def to_coins(requirements: Iterable[PaymentRequirement]) -> list[Coin]:
    return [to_coin(requirement) for requirement in requirements]
