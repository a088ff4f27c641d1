from __future__ import annotations
from dataclasses import dataclass, replace

from web3 import Web3

from entity.config import Config
from entity.errors import UnknownNetworkError


@dataclass(frozen=True)
class NetworkAddresses():
    ether_token: str
    erc20_proxy: str


# canonical WETH9 and 0x ERC-20 proxy deployments
NETWORK_ADDRESSES: dict[int, NetworkAddresses] = {
    # mainnet
    1: NetworkAddresses(
        ether_token="0xc02aaa39b223fe8d0a0e5c4f27ead9083c756cc2",
        erc20_proxy="0x95e6f48254609a6ee006f7d493c8e5fb97094cef",
    ),
    # ropsten
    3: NetworkAddresses(
        ether_token="0xc778417e063141139fce010982780140aa0cd5ab",
        erc20_proxy="0xf1ec01d6236d3cd881a0bf0130ea25fe4234003e",
    ),
    # rinkeby
    4: NetworkAddresses(
        ether_token="0xc778417e063141139fce010982780140aa0cd5ab",
        erc20_proxy="0x2f5ae4f6106e89b4147651688a92256885c5f410",
    ),
    # kovan
    42: NetworkAddresses(
        ether_token="0xd0a1e359811322d97991e03f863a0c30c2cf029c",
        erc20_proxy="0xf1ec01d6236d3cd881a0bf0130ea25fe4234003e",
    ),
    # 0x ganache snapshot
    50: NetworkAddresses(
        ether_token="0x0b1ba0af832d7c05fd64161e0db78e85978e8082",
        erc20_proxy="0x1dc4c1cefef38a777b15aa20260a54e584b16c48",
    ),
}


def get_contract_addresses_for_network_or_raise(network_id: int, config: Config = None) -> NetworkAddresses:
    """
    Resolves WETH9 and ERC-20 proxy addresses for a network.

    Addresses from the config (network.addresses) take precedence over the built-in ones,
    a configured network may override just one of the two fields.

    Args:
        network_id (int): Network id as reported by `net_version`.
        config (Config): Optional config, the singleton is used by default.

    Returns:
        NetworkAddresses: Checksummed contract addresses.

    Raises:
        UnknownNetworkError: If neither the built-in table nor the config knows the network.
    """
    config = config or Config.get_singleton()
    addresses = NETWORK_ADDRESSES.get(network_id)
    override = config.network_addresses.get(network_id)
    if override:
        try:
            addresses = replace(addresses, **override) if addresses else NetworkAddresses(**override)
        except TypeError:
            raise UnknownNetworkError(
                f"invalid contract addresses configured for network {network_id}: {override}"
            )
    if addresses is None:
        raise UnknownNetworkError(f"no contract addresses for network {network_id}")
    return NetworkAddresses(
        ether_token=Web3.to_checksum_address(addresses.ether_token),
        erc20_proxy=Web3.to_checksum_address(addresses.erc20_proxy),
    )
