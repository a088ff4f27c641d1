from __future__ import annotations
from typing import Any
import logging

from web3 import AsyncWeb3

import utils.web3_utils as web3_utils


logger = logging.getLogger(__name__)


class Contract():
    """
    Contract class for interacting with Ethereum smart contracts using the async Web3.py API.

    Attributes:
        web3 (AsyncWeb3): The AsyncWeb3 instance the contract is bound to.
        contract_address (str): Checksummed contract address.
        abi (list): Contract ABI loaded from contracts/abi.

    Methods:
        __init__(web3: AsyncWeb3, contract_address: str, abi_name: str):
            Binds the contract at the given address with the named ABI.

        call_view_func(contract_function: str, *args) -> Any:
            Calls a view function on the contract.

        send_tx(contract_function: str, *args, tx_params: dict = None) -> str:
            Validates the transaction with eth_call, then sends it with eth_sendTransaction
            through the node-managed account. Returns the transaction hash.
    """

    def __init__(self, web3: AsyncWeb3, contract_address: str, abi_name: str):
        self.web3 = web3
        self.contract_address = AsyncWeb3.to_checksum_address(contract_address)
        self.abi = web3_utils.load_abi(abi_name)
        self.contract = self.web3.eth.contract(address=self.contract_address, abi=self.abi)

    async def call_view_func(self, contract_function: str, *args) -> Any:
        logger.debug("Call %s.%s%s", self.contract_address, contract_function, args)
        return await self.contract.functions[contract_function](*args).call()

    async def send_tx(self, contract_function: str, *args, tx_params: dict = None) -> str:
        tx_params = dict(tx_params or {})
        contract_function_obj = self.contract.functions[contract_function](*args)
        # reverts surface here instead of in a mined failed transaction
        await contract_function_obj.call(tx_params)
        tx_hash = await contract_function_obj.transact(tx_params)
        logger.debug("Sent %s.%s%s: %s", self.contract_address, contract_function, args, tx_hash.to_0x_hex())
        return tx_hash.to_0x_hex()

    def __eq__(self, other: Contract):
        return isinstance(other, Contract) and self.contract_address == other.contract_address

    def __hash__(self):
        return hash(self.contract_address)
