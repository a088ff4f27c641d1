from __future__ import annotations

from web3 import AsyncWeb3

from .contract import Contract


class WETH9(Contract):
    """
    WETH9 is a class that represents the canonical wrapped ether contract.

    Methods:
        deposit(amount: int, tx_params: dict) -> str:
            Sends `amount` wei to the contract's deposit method, minting the same amount of WETH.

        withdraw(amount: int, tx_params: dict) -> str:
            Burns `amount` WETH and returns the same amount of ether to the sender.
    """

    def __init__(self, web3: AsyncWeb3, contract_address: str):
        super().__init__(web3, contract_address, "WETH9")

    async def deposit(self, amount: int, tx_params: dict = None) -> str:
        return await self.send_tx("deposit", tx_params={**(tx_params or {}), "value": amount})

    async def withdraw(self, amount: int, tx_params: dict = None) -> str:
        return await self.send_tx("withdraw", amount, tx_params=tx_params)
