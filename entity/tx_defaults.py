from __future__ import annotations
from dataclasses import dataclass, fields, replace

from web3 import Web3


@dataclass
class TxDefaults():
    """
    Optional transaction overrides: gas limit, gas price and sender address.
    Unset fields are left for the node to fill in.
    """
    gas: int = None
    gas_price: int = None
    from_address: str = None

    @staticmethod
    def from_dict(data: dict) -> TxDefaults:
        """
        Accepts both python style (gas_price, from_address) and JSON-RPC style
        (gasPrice, from) keys.
        """
        data = data or {}
        return TxDefaults(
            gas=data.get("gas"),
            gas_price=data.get("gas_price", data.get("gasPrice")),
            from_address=data.get("from_address", data.get("from")),
        )

    @staticmethod
    def coerce(value) -> TxDefaults:
        if value is None:
            return TxDefaults()
        if isinstance(value, TxDefaults):
            return replace(value)
        if isinstance(value, dict):
            return TxDefaults.from_dict(value)
        raise TypeError(f"expected TxDefaults or dict, got {type(value).__name__}")

    def merge(self, other: TxDefaults) -> TxDefaults:
        """
        Returns a copy where every field set on `other` overrides this one.
        """
        if other is None:
            return replace(self)
        overrides = {f.name: getattr(other, f.name) for f in fields(other) if getattr(other, f.name) is not None}
        return replace(self, **overrides)

    def to_tx_params(self) -> dict:
        params = {}
        if self.gas is not None:
            params["gas"] = self.gas
        if self.gas_price is not None:
            params["gasPrice"] = self.gas_price
        if self.from_address is not None:
            params["from"] = Web3.to_checksum_address(self.from_address)
        return params
