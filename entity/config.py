from __future__ import annotations
import json
import os


DEFAULT_CONFIG_PATH = "config/config.json"

DEFAULT_RPC_URL = "http://localhost:8545"


class Config():

    instance = None

    def __init__(self, path: str = None):
        self.path = path or os.getenv("WETH_HELPER_CONFIG", DEFAULT_CONFIG_PATH)
        self.config = {}
        if os.path.exists(self.path):
            with open(self.path, "r") as f:
                self.config = json.load(f)

    @staticmethod
    def get_singleton() -> Config:
        if Config.instance is None:
            Config.instance = Config()
        return Config.instance

    @staticmethod
    def reset():
        Config.instance = None

    # Network

    @property
    def rpc_url(self) -> str:
        """
        JSON-RPC endpoint of the node (local ganache, Infura, etc.).

        Returns:
            str: The RPC URL specified in the network configuration.
        """
        return self.config.get("network", {}).get("rpc", DEFAULT_RPC_URL)

    @property
    def network_addresses(self) -> dict[int, dict]:
        """
        Extra or overriding contract addresses per network id, in the form
        {network_id: {"ether_token": address, "erc20_proxy": address}}.

        Returns:
            dict: Addresses keyed by integer network id.
        """
        addresses = self.config.get("network", {}).get("addresses", {})
        return {int(network_id): item for network_id, item in addresses.items()}

    # Transactions

    @property
    def tx_defaults(self) -> dict:
        """
        Default transaction options: gas, gas_price and from.

        Returns:
            dict: Transaction defaults, empty when not configured.
        """
        return self.config.get("tx_defaults", {})

    # Wallet

    @property
    def wallet_addresses(self) -> dict:
        """
        Dictinary wallet_alias -> wallet_address.
        Allows to manipulate with aliases instead of addresses.

        Returns:
            dict: A dictionary containing wallet addresses.
        """
        return self.config.get("wallet", {}).get("addresses", {})

    # Styles

    @property
    def is_styles_active(self) -> bool:
        return self.config.get("styles", {}).get("active", False)

    @property
    def is_styles_bright(self) -> bool:
        return self.config.get("styles", {}).get("bright", False)
