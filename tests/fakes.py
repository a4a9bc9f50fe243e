"""In-memory JSON-RPC node for AsyncWeb3 clients.

Responses pass through web3's own request and error formatting, so reverts
reach the code under test in the shape a real node produces.
"""

import asyncio

import eth_abi
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes
from web3 import AsyncWeb3
from web3.providers import AsyncBaseProvider

AUTHORIZATION_STATE_SELECTOR = function_signature_to_4byte_selector("authorizationState(address,bytes32)")
TRANSFER_WITH_AUTHORIZATION_SELECTOR = function_signature_to_4byte_selector(
    "transferWithAuthorization(address,address,uint256,uint256,uint256,bytes32,uint8,bytes32,bytes32)"
)

USDT_BSC = "0x55d398326f99059fF775485246999027B3197955"
USDC_BASE = "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913"

CONTRACT_CODE = "0x60806040"

ENCODED_FALSE = "0x" + eth_abi.encode(["bool"], [False]).hex()
EXPIRED_REVERT_DATA = "0x08c379a0" + eth_abi.encode(["string"], ["FiatTokenV2: authorization is expired"]).hex()
PANIC_OVERFLOW_DATA = "0x4e487b71" + eth_abi.encode(["uint256"], [0x11]).hex()

# JSON-RPC error objects as nodes send them
BARE_REVERT = {"code": -32000, "message": "execution reverted"}
EMPTY_DATA_REVERT = {"code": 3, "message": "execution reverted", "data": "0x"}
EXPIRED_REVERT = {
    "code": 3,
    "message": "execution reverted: FiatTokenV2: authorization is expired",
    "data": EXPIRED_REVERT_DATA,
}
PANIC_REVERT = {"code": 3, "message": "execution reverted", "data": PANIC_OVERFLOW_DATA}
CUSTOM_ERROR_REVERT = {"code": 3, "message": "execution reverted", "data": "0x1f6a65b6"}
INTERNAL_ERROR = {"code": -32603, "message": "internal error"}
RATE_LIMITED = {"code": -32005, "message": "limit exceeded"}
HEADER_NOT_FOUND = {"code": -32000, "message": "header not found"}


class FakeProvider(AsyncBaseProvider):
    """Answers eth_call by function selector.

    An outcome is a hex result, a JSON-RPC error object, or an exception to raise.
    Selectors without an outcome get a bare revert, like a contract with no fallback.
    """

    def __init__(
            self,
            chain_id: int = 56,
            code: str | BaseException = CONTRACT_CODE,
            outcomes: dict = None,
            delay: float = 0,
    ):
        super().__init__()
        self.chain_id = chain_id
        self.code = code
        self.outcomes = outcomes or {}
        self.delay = delay
        self.requests: list[tuple[str, list]] = []
        self.disconnects = 0
        self._request_id = 0

    async def make_request(self, method, params):
        self.requests.append((method, params))
        if method == "eth_chainId":
            outcome = hex(self.chain_id)
        elif method == "eth_getCode":
            outcome = self.code
        elif method == "eth_call":
            if self.delay:
                await asyncio.sleep(self.delay)
            selector = bytes(HexBytes(params[0]["data"])[:4])
            outcome = self.outcomes.get(selector, BARE_REVERT)
        else:
            outcome = {"code": -32601, "message": f"the method {method} does not exist/is not available"}

        if isinstance(outcome, BaseException):
            raise outcome
        self._request_id += 1
        if isinstance(outcome, dict):
            return {"jsonrpc": "2.0", "id": self._request_id, "error": outcome}
        return {"jsonrpc": "2.0", "id": self._request_id, "result": outcome}

    async def is_connected(self, show_traceback: bool = False) -> bool:
        return True

    async def disconnect(self) -> None:
        self.disconnects += 1

    @property
    def calls(self) -> list[dict]:
        return [params[0] for method, params in self.requests if method == "eth_call"]

    @property
    def get_code_calls(self) -> list[str]:
        return [params[0] for method, params in self.requests if method == "eth_getCode"]

    @property
    def called_selectors(self) -> list[bytes]:
        return [bytes(HexBytes(call["data"])[:4]) for call in self.calls]


def fake_client(**kwargs) -> AsyncWeb3:
    return AsyncWeb3(FakeProvider(**kwargs))


def eip3009_client(**kwargs) -> AsyncWeb3:
    """A FiatToken-like contract: authorizationState answers, the transfer reverts on expiry."""
    return fake_client(outcomes={
        AUTHORIZATION_STATE_SELECTOR: ENCODED_FALSE,
        TRANSFER_WITH_AUTHORIZATION_SELECTOR: EXPIRED_REVERT,
    }, **kwargs)


class ChainFactorySpy:
    """Replaces Chain.from_network and records every client it hands out."""

    def __init__(self, client: AsyncWeb3):
        self.client = client
        self.calls = []

    def __call__(self, network, **kwargs):
        self.calls.append((network.short_name, kwargs))
        return self.client
