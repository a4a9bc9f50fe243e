"""ERC-3009 capability probe.

Decides whether a token contract supports ``transferWithAuthorization``, the
function a client needs to build a gasless payment proof. Detection strategies
run in order and the first conclusive answer wins:

1. ``BytecodeStrategy`` - an address without code can't implement anything.
2. ``AuthorizationStateStrategy`` - a well-formed answer from the ERC-3009
   ``authorizationState`` view is conclusive. Any other outcome falls through.
3. ``TransferWithAuthorizationStrategy`` - static call of the function itself
   with placeholder arguments. If the dispatcher accepted the selector the call
   either succeeds or reverts with a reason, panic code or custom error, and
   the function is considered present. A bare revert without data is what the
   Solidity dispatcher produces for an unknown selector.

The third rule can misclassify a contract that reverts with a reason for an
unrelated cause (a failing fallback, a proxy whose implementation is missing).

Transport failures raise ``ProbeError``, and so do eth_call errors that are not
reverts. They never turn into "unsupported".
"""
import asyncio
import logging

from aiohttp import ClientError
from eth_typing import ChecksumAddress
from eth_utils import is_hex, to_checksum_address
from web3 import AsyncWeb3
from web3.exceptions import BadFunctionCallOutput, ContractLogicError, Web3Exception

from .contract import EIP3009
from .contract.eip3009 import PLACEHOLDER_ADDRESS, ZERO_BYTES32
from .exceptions import InvalidContractAddress, ProbeError, probe_error_from_message
from .utils.eth import is_contract_address, is_empty_data

logger = logging.getLogger(__name__)

TRANSPORT_ERRORS = (
    Web3Exception,
    ClientError,
    asyncio.TimeoutError,
    OSError,
    ValueError,
)

REVERT_PREFIX = "execution reverted"
REVERT_MARKER = "revert"


def revert_data(error: ContractLogicError) -> str | None:
    """
    :return: revert payload as hex, None if the node sent none

    A node that omits ``data`` gets a non-hex placeholder from web3, it is not a payload.
    """
    data = getattr(error, "data", None)
    if isinstance(data, (bytes, bytearray)):
        data = "0x" + bytes(data).hex()
    if not isinstance(data, str) or not is_hex(data) or is_empty_data(data):
        return None
    return data


def revert_reason(error: ContractLogicError) -> str:
    message = getattr(error, "message", None) or ""
    if message.lower().startswith(REVERT_PREFIX):
        message = message[len(REVERT_PREFIX):]
    return message.strip(" :")


def is_revert(error: ContractLogicError) -> bool:
    """Some nodes report non-revert eth_call failures through the same error path."""
    message = getattr(error, "message", None) or ""
    return revert_data(error) is not None or REVERT_MARKER in message.lower()


def dispatch_accepted(error: ContractLogicError) -> bool:
    """
    :return: True if the revert carries data or a reason, i.e. the selector reached function code
    """
    return revert_data(error) is not None or bool(revert_reason(error))


class DetectionStrategy:
    name: str = "base"

    async def detect(self, client: AsyncWeb3, address: ChecksumAddress) -> bool | None:
        """
        :return: True or False if conclusive, None to fall through to the next strategy
        """
        raise NotImplementedError


class BytecodeStrategy(DetectionStrategy):
    name = "bytecode"

    async def detect(self, client: AsyncWeb3, address: ChecksumAddress) -> bool | None:
        code = await client.eth.get_code(address)
        if is_empty_data(code):
            logger.debug("%s has no code", address)
            return False
        return None


class AuthorizationStateStrategy(DetectionStrategy):
    name = "authorizationState"

    async def detect(self, client: AsyncWeb3, address: ChecksumAddress) -> bool | None:
        token = EIP3009(client, address)
        try:
            await token.authorization_state(PLACEHOLDER_ADDRESS, ZERO_BYTES32)
        except ContractLogicError as e:
            if not is_revert(e):
                raise
            logger.debug("authorizationState reverted on %s: %s", address, e)
            return None
        except BadFunctionCallOutput as e:
            logger.debug("authorizationState answer of %s is not a bool: %s", address, e)
            return None
        return True


class TransferWithAuthorizationStrategy(DetectionStrategy):
    name = "transferWithAuthorization"

    async def detect(self, client: AsyncWeb3, address: ChecksumAddress) -> bool | None:
        token = EIP3009(client, address)
        try:
            await token.call_transfer_with_authorization()
        except ContractLogicError as e:
            if not is_revert(e):
                raise
            accepted = dispatch_accepted(e)
            logger.debug("transferWithAuthorization reverted on %s (dispatch accepted: %s): %s",
                         address, accepted, e)
            return accepted
        return True


DEFAULT_STRATEGIES: tuple[DetectionStrategy, ...] = (
    BytecodeStrategy(),
    AuthorizationStateStrategy(),
    TransferWithAuthorizationStrategy(),
)


class CapabilityProbe:
    def __init__(self, strategies: tuple[DetectionStrategy, ...] = DEFAULT_STRATEGIES):
        self.strategies = strategies

    def __repr__(self):
        return f"{self.__class__.__name__}(strategies={[strategy.name for strategy in self.strategies]})"

    async def probe(self, client: AsyncWeb3, contract_address: ChecksumAddress | str) -> bool:
        """
        :return: True if the contract supports transferWithAuthorization
        :raises: ProbeError if an RPC call failed and capability is undetermined
        """
        if not is_contract_address(contract_address):
            raise InvalidContractAddress(f"Invalid contract address: {contract_address}")
        address = to_checksum_address(contract_address)

        for strategy in self.strategies:
            try:
                result = await strategy.detect(client, address)
            except ProbeError:
                raise
            except TRANSPORT_ERRORS as e:
                logger.warning("RPC failure during %s detection for %s: %r", strategy.name, address, e)
                raise probe_error_from_message(f"{strategy.name}: {e}", address) from e

            if result is not None:
                logger.debug("%s: %s decided supported=%s", address, strategy.name, result)
                return result

        return False


async def probe(client: AsyncWeb3, contract_address: ChecksumAddress | str) -> bool:
    return await CapabilityProbe().probe(client, contract_address)
