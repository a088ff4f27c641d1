from __future__ import annotations

from web3 import AsyncWeb3

from .contract import Contract
from utils.decorators import to_checksum_address
from utils.units import MAX_UINT256


class ERC20(Contract):
    """
    ERC20 class for interacting with a single ERC20 token contract.

    Methods:
        get_allowance(owner_address: str, spender_address: str) -> int:
            Returns the allowance of the spender for the owner's tokens.

        get_balance(wallet_address: str) -> int:
            Returns the balance of the given wallet address.

        approve(spender_address: str, amount: int, tx_params: dict) -> str:
            Approves the spender to spend the specified amount of tokens of the sender.
    """

    def __init__(self, web3: AsyncWeb3, token_address: str):
        super().__init__(web3, token_address, "ERC20")

    @to_checksum_address(1,2)
    async def get_allowance(self, owner_address: str, spender_address: str) -> int:
        return await self.call_view_func('allowance', owner_address, spender_address)

    @to_checksum_address(1)
    async def get_balance(self, wallet_address: str) -> int:
        return await self.call_view_func('balanceOf', wallet_address)

    @to_checksum_address(1)
    async def approve(self, spender_address: str, amount: int, tx_params: dict = None) -> str:
        return await self.send_tx('approve', spender_address, amount, tx_params=tx_params)


class ERC20Token():
    """
    Token abstraction over any number of ERC20 contracts, bound to a spender proxy.

    Attributes:
        UNLIMITED_ALLOWANCE (int): Maximum uint256, used as an "unlimited" allowance.
        proxy_address (str): The spender used by the *_proxy_allowance methods.
    """

    UNLIMITED_ALLOWANCE = MAX_UINT256

    def __init__(self, web3: AsyncWeb3, proxy_address: str, tx_defaults: dict = None):
        self.web3 = web3
        self.proxy_address = AsyncWeb3.to_checksum_address(proxy_address)
        self.tx_defaults = dict(tx_defaults or {})
        self.contract_instances: dict[str, ERC20] = {}

    def get_instance(self, token_address: str) -> ERC20:
        token_address = AsyncWeb3.to_checksum_address(token_address)
        if token_address not in self.contract_instances:
            self.contract_instances[token_address] = ERC20(self.web3, token_address)
        return self.contract_instances[token_address]

    async def get_balance(self, token_address: str, owner_address: str) -> int:
        return await self.get_instance(token_address).get_balance(owner_address)

    async def get_allowance(self, token_address: str, owner_address: str, spender_address: str) -> int:
        return await self.get_instance(token_address).get_allowance(owner_address, spender_address)

    async def get_proxy_allowance(self, token_address: str, owner_address: str) -> int:
        return await self.get_allowance(token_address, owner_address, self.proxy_address)

    async def set_allowance(self, token_address: str, spender_address: str, amount: int, tx_params: dict = None) -> str:
        tx_params = {**self.tx_defaults, **(tx_params or {})}
        return await self.get_instance(token_address).approve(spender_address, amount, tx_params)

    async def set_proxy_allowance(self, token_address: str, amount: int, tx_params: dict = None) -> str:
        return await self.set_allowance(token_address, self.proxy_address, amount, tx_params)

    async def set_unlimited_proxy_allowance(self, token_address: str, tx_params: dict = None) -> str:
        return await self.set_proxy_allowance(token_address, self.UNLIMITED_ALLOWANCE, tx_params)
