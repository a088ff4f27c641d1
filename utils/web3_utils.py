import json
from pathlib import Path

from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.providers.async_base import AsyncBaseProvider

from entity.errors import WethHelperError


ABI_DIR = Path(__file__).resolve().parent.parent / "contracts" / "abi"


def standardize_provider(provider) -> AsyncWeb3:
    """
    Turns a supported provider into an AsyncWeb3 instance.

    Args:
        provider: AsyncWeb3 instance, async web3 provider or JSON-RPC URL.

    Returns:
        AsyncWeb3: Web3 instance bound to the provider.

    Raises:
        WethHelperError: If the provider is of an unsupported type.
    """
    if isinstance(provider, AsyncWeb3):
        return provider
    if isinstance(provider, AsyncBaseProvider):
        return AsyncWeb3(provider)
    if isinstance(provider, str) and provider:
        return AsyncWeb3(AsyncHTTPProvider(provider))
    raise WethHelperError(f"unsupported provider: {provider!r}")

def load_abi(abi_name: str) -> list:
    with open(ABI_DIR / f"{abi_name}.json") as f:
        abi_json = json.load(f)
    return abi_json

async def get_network_id(web3: AsyncWeb3) -> int:
    return int(await web3.net.version)

async def get_available_addresses(web3: AsyncWeb3) -> list[str]:
    return list(await web3.eth.accounts)

async def get_eth_balance(web3: AsyncWeb3, address: str) -> int:
    return await web3.eth.get_balance(AsyncWeb3.to_checksum_address(address))

def raise_address_not_valid(address: str):
    if not isinstance(address, str) or not AsyncWeb3.is_address(address):
        raise WethHelperError(f"invalid address: {address}")
