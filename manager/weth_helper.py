from __future__ import annotations
from decimal import Decimal
import asyncio
import logging

from contracts.erc20 import ERC20Token
from contracts.weth9 import WETH9
from entity.config import Config
from entity.errors import WethHelperError
from entity.network import get_contract_addresses_for_network_or_raise
from entity.tx_defaults import TxDefaults
import utils.units as units
import utils.web3_utils as web3_utils


logger = logging.getLogger(__name__)


class WethHelper:
    """
    WethHelper (wrapped ether helper) wraps and unwraps ether through the canonical WETH9
    contract, checks ETH and WETH balances and manages the WETH allowance of the 0x ERC-20 proxy.

    All amounts are integers in base units (wei). `to_base_units` and `from_base_units`
    convert between base units and ether.

    Network constants are resolved once, asynchronously: every coroutine waits for the same
    initialization task before doing anything else.

    Attributes:
        web3 (AsyncWeb3): Web3 instance built from the provider.
        network_id (int): Network id of the detected network.
        weth_address (str): Address of the canonical WETH contract on that network.
        proxy_address (str): Address of the 0x ERC-20 proxy (allowance spender).
        coinbase (str): The node's first account, used when no address is given.
        ready (bool): True after initialization completes.
    """

    def __init__(self, provider, tx_defaults: TxDefaults | dict = None, config: Config = None):
        """
        Args:
            provider: AsyncWeb3 instance, async web3 provider or JSON-RPC URL.
            tx_defaults (TxDefaults | dict): Optional defaults used for all transactions.
            config (Config): Optional config, used for extra network addresses.
        """
        self.web3 = web3_utils.standardize_provider(provider)
        self.config = config or Config.get_singleton()
        try:
            self.tx_defaults = TxDefaults.coerce(tx_defaults)
        except TypeError as e:
            raise WethHelperError(f"invalid transaction defaults: {e}") from e

        self.network_id: int = None
        self.weth_address: str = None
        self.proxy_address: str = None
        self.coinbase: str = None
        self.ready = False

        self._weth: WETH9 = None
        self._erc20: ERC20Token = None
        self._init: asyncio.Future = None
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            # no loop yet, the first awaiting coroutine schedules initialization
            pass
        else:
            self._schedule_initialization()

    async def wait_until_ready(self):
        if self._init is None:
            self._schedule_initialization()
        await asyncio.shield(self._init)

    async def wrap(self, amount: int, tx_options: TxDefaults | dict = None) -> str:
        """
        Generates WETH by "wrapping" ether: sends it to the WETH contract's deposit method.

        The transaction is sent from the configured `from` address or the detected
        `coinbase` unless overridden with `tx_options`.

        Args:
            amount (int): The amount of ether to wrap in base units (wei).
            tx_options (TxDefaults | dict): Optional gas limit, gas price and from address.

        Returns:
            str: The submitted transaction hash.
        """
        amount = units.assert_valid_base_unit_amount("amount", amount)
        await self.wait_until_ready()
        options = self._tx_params(tx_options)
        try:
            return await self._weth.deposit(amount, options)
        except Exception as e:
            logger.error("Wrap failed: %s", e)
            raise WethHelperError(f"failed to wrap ether: {e}") from e

    async def unwrap(self, amount: int, tx_options: TxDefaults | dict = None) -> str:
        """
        Generates ether by "unwrapping" WETH: requests a withdrawal from the WETH contract.

        Args:
            amount (int): The amount of WETH to unwrap in base units (wei).
            tx_options (TxDefaults | dict): Optional gas limit, gas price and from address.

        Returns:
            str: The submitted transaction hash.
        """
        amount = units.assert_valid_base_unit_amount("amount", amount)
        await self.wait_until_ready()
        options = self._tx_params(tx_options)
        try:
            return await self._weth.withdraw(amount, options)
        except Exception as e:
            logger.error("Unwrap failed: %s", e)
            raise WethHelperError(f"failed to unwrap ether: {e}") from e

    async def get_ether_balance(self, address: str = None) -> int:
        """
        Fetches the ether balance (in wei) of `address`, or of the coinbase if omitted.
        """
        await self.wait_until_ready()
        address = self._owner(address)
        try:
            return await web3_utils.get_eth_balance(self.web3, address)
        except Exception as e:
            logger.error("Ether balance of %s failed: %s", address, e)
            raise WethHelperError(f"failed to get ether balance: {e}") from e

    async def get_weth_balance(self, address: str = None) -> int:
        """
        Fetches the WETH balance (in wei) of `address`, or of the coinbase if omitted.
        """
        await self.wait_until_ready()
        address = self._owner(address)
        try:
            return await self._erc20.get_balance(self.weth_address, address)
        except Exception as e:
            logger.error("WETH balance of %s failed: %s", address, e)
            raise WethHelperError(f"failed to get WETH balance: {e}") from e

    async def get_proxy_allowance(self, owner: str = None) -> int:
        """
        Fetches the WETH allowance `owner` (or the coinbase) granted to the 0x ERC-20 proxy.
        """
        await self.wait_until_ready()
        owner = self._owner(owner)
        try:
            return await self._erc20.get_proxy_allowance(self.weth_address, owner)
        except Exception as e:
            logger.error("Proxy allowance of %s failed: %s", owner, e)
            raise WethHelperError(f"failed to get ERC-20 proxy allowance for WETH: {e}") from e

    async def set_proxy_allowance(self, amount: int, tx_options: TxDefaults | dict = None) -> str:
        """
        Sets an arbitrary WETH allowance for the 0x ERC-20 proxy contract.

        If a specific allowance is not needed, an unlimited allowance is cheaper to trade with,
        see `set_unlimited_proxy_allowance`.

        Args:
            amount (int): The amount of tokens the proxy may spend (in base units).
            tx_options (TxDefaults | dict): Optional gas limit, gas price and from address.

        Returns:
            str: The submitted transaction hash.
        """
        amount = units.assert_valid_base_unit_amount("amount", amount)
        await self.wait_until_ready()
        options = self._tx_params(tx_options)
        try:
            return await self._erc20.set_proxy_allowance(self.weth_address, amount, options)
        except Exception as e:
            logger.error("Setting proxy allowance failed: %s", e)
            raise WethHelperError(f"failed to set ERC-20 proxy allowance for WETH: {e}") from e

    async def set_unlimited_proxy_allowance(self, tx_options: TxDefaults | dict = None) -> str:
        """
        Sets an "unlimited" (maximum uint256) WETH allowance for the 0x ERC-20 proxy.
        """
        await self.wait_until_ready()
        options = self._tx_params(tx_options)
        try:
            return await self._erc20.set_unlimited_proxy_allowance(self.weth_address, options)
        except Exception as e:
            logger.error("Setting unlimited proxy allowance failed: %s", e)
            raise WethHelperError(f"failed to set ERC-20 proxy allowance for WETH: {e}") from e

    def to_base_units(self, value, decimals: int = units.DEFAULT_DECIMALS) -> int:
        return units.to_base_units(value, decimals)

    def from_base_units(self, value, decimals: int = units.DEFAULT_DECIMALS) -> Decimal:
        return units.from_base_units(value, decimals)

    def _owner(self, address: str) -> str:
        address = address or self.coinbase
        if address is None:
            raise WethHelperError("no address given and the node has no accounts")
        return address

    def _tx_params(self, tx_options: TxDefaults | dict) -> dict:
        try:
            return self.tx_defaults.merge(TxDefaults.coerce(tx_options)).to_tx_params()
        except (TypeError, ValueError) as e:
            raise WethHelperError(f"invalid transaction options: {e}") from e

    def _schedule_initialization(self):
        self._init = asyncio.ensure_future(self._initialize())
        # marks the failure as retrieved when nobody awaits the task, it is logged in _initialize
        self._init.add_done_callback(lambda task: task.cancelled() or task.exception())

    async def _initialize(self):
        try:
            self.network_id = await web3_utils.get_network_id(self.web3)
            addresses = get_contract_addresses_for_network_or_raise(self.network_id, self.config)
            self.weth_address = addresses.ether_token
            self.proxy_address = addresses.erc20_proxy

            # send from coinbase if 'from' was not provided by the user
            accounts = await web3_utils.get_available_addresses(self.web3)
            self.coinbase = accounts[0] if accounts else None
            if self.tx_defaults.from_address is None:
                self.tx_defaults.from_address = self.coinbase

            tx_params = self.tx_defaults.to_tx_params()
            self._weth = WETH9(self.web3, self.weth_address)
            self._erc20 = ERC20Token(self.web3, self.proxy_address, tx_params)

            self.ready = True
            logger.info(
                "Initialized on network %s: WETH %s, ERC-20 proxy %s, coinbase %s",
                self.network_id, self.weth_address, self.proxy_address, self.coinbase,
            )
        except WethHelperError as e:
            logger.error("Initialization failed: %s", e)
            raise
        except Exception as e:
            logger.error("Initialization failed: %s", e)
            raise WethHelperError(f"failed to initialize: {e}") from e
