from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from .enums import AmountFormat, Scheme
from .exceptions import MissingTokenMetadata


class Explorer(BaseModel):
    name: str
    url: str
    standard: str = "EIP3091"


class NativeCurrency(BaseModel):
    name: str = "Ether"
    symbol: str = "ETH"
    decimals: int = 18


class NetworkInfo(BaseModel):
    """One entry of the network registry."""
    model_config = ConfigDict(frozen=True)

    short_name: str
    chain_id: int
    rpc: str
    name: str
    icon: str = ""
    native_currency: NativeCurrency = Field(default_factory=NativeCurrency)
    explorers: list[Explorer] = Field(default_factory=list)
    is_testnet: bool = False


class PaymentRequirement(BaseModel):
    """One accepted way to pay for a gated resource.

    Wire payloads use camelCase keys, snake_case attribute names are accepted too.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )

    scheme: str = Scheme.EXACT.value
    namespace: str
    token_address: str | None = Field(None, alias="tokenAddress")
    amount_required: Decimal = Field(..., alias="amountRequired")
    amount_required_format: AmountFormat = Field(AmountFormat.HUMAN_READABLE, alias="amountRequiredFormat")
    network_id: str = Field(..., alias="networkId")
    pay_to_address: str = Field(..., alias="payToAddress")
    description: str = ""
    token_decimals: int | None = Field(None, alias="tokenDecimals")
    token_symbol: str | None = Field(None, alias="tokenSymbol")

    def _require_decimals(self) -> int:
        if self.token_decimals is None:
            raise MissingTokenMetadata(
                f"tokenDecimals is required to convert {self.amount_required_format.value} amount"
                f" of token {self.token_address or '<unknown>'}")
        return self.token_decimals

    def human_amount(self) -> Decimal:
        if self.amount_required_format is AmountFormat.HUMAN_READABLE:
            return self.amount_required
        return self.amount_required.scaleb(-self._require_decimals())

    def atomic_amount(self) -> int:
        if self.amount_required_format is AmountFormat.ATOMIC:
            return int(self.amount_required)
        return int(self.amount_required.scaleb(self._require_decimals()))


class Coin(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    payment_requirement: PaymentRequirement


class NetworkBundle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str
    coins: list[Coin]


class CapabilityResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    supported: bool
    contract_address: str = Field(..., alias="contractAddress")
    network_name: str = Field(..., alias="networkName")
    error: str | None = None
