"""ERC-3009 "Transfer With Authorization": https://eips.ethereum.org/EIPS/eip-3009
"""
from eth_typing import BlockIdentifier, ChecksumAddress
from web3 import AsyncWeb3

from ._abi import EIP3009_ABI
from .contract import Contract

# Placeholder arguments for selector detection. validBefore=0 means the
# authorization has already expired, so a compliant token always reverts.
PLACEHOLDER_ADDRESS = "0x0000000000000000000000000000000000000001"
ZERO_BYTES32 = b"\x00" * 32


class EIP3009(Contract):
    def __init__(
            self,
            client: AsyncWeb3,
            address: ChecksumAddress | str,
            abi=None,
    ):
        abi = abi or EIP3009_ABI
        super().__init__(client, address, abi)

    async def call_transfer_with_authorization(self, block_identifier: BlockIdentifier = "latest"):
        """
        transferWithAuthorization(address,address,uint256,uint256,uint256,bytes32,uint8,bytes32,bytes32)
        as eth_call with placeholder arguments

        :raises: ContractLogicError if the call reverts
        """
        return await self.functions.transferWithAuthorization(
            PLACEHOLDER_ADDRESS,  # from
            PLACEHOLDER_ADDRESS,  # to
            0,                    # value
            0,                    # validAfter
            0,                    # validBefore
            ZERO_BYTES32,         # nonce
            27,                   # v
            ZERO_BYTES32,         # r
            ZERO_BYTES32,         # s
        ).call(block_identifier=block_identifier)

    async def authorization_state(
            self,
            authorizer: ChecksumAddress | str,
            nonce: bytes,
            block_identifier: BlockIdentifier = "latest",
    ) -> bool:
        """
        authorizationState(address authorizer, bytes32 nonce) returns (bool)

        :raises: ContractLogicError, BadFunctionCallOutput
        """
        return await self.functions.authorizationState(authorizer, nonce).call(block_identifier=block_identifier)
