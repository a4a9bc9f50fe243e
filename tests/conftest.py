"""
Pytest fixtures
"""

import pytest

from x402_paywall.models import PaymentRequirement
from x402_paywall.registry import load_registry

from fakes import USDT_BSC


@pytest.fixture
def registry():
    return load_registry()


@pytest.fixture
def make_requirement():
    """Builds a requirement from wire-shaped fields. Passing None drops a field."""

    def _make_requirement(**overrides) -> PaymentRequirement:
        data = {
            "scheme": "exact",
            "namespace": "evm",
            "tokenAddress": USDT_BSC,
            "amountRequired": 1000,
            "amountRequiredFormat": "atomic",
            "networkId": "56",
            "payToAddress": "0x209693Bc6afc0C5328bA36FaF03C514EF312287C",
            "description": "Weather data access",
            "tokenDecimals": 18,
            "tokenSymbol": "USDT",
        }
        data.update(overrides)
        return PaymentRequirement(**{key: value for key, value in data.items() if value is not None})

    return _make_requirement
