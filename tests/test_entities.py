"""Config, network addresses and transaction defaults."""
import pytest
from web3 import Web3

from entity.config import Config, DEFAULT_RPC_URL
from entity.errors import ERROR_PREFIX, UnknownNetworkError, WethHelperError
from entity.network import NETWORK_ADDRESSES, get_contract_addresses_for_network_or_raise
from entity.tx_defaults import TxDefaults


ADDRESS = "0x5409ed021d9299bf6814279a6a1411a7e866a631"
OTHER = "0x6ecbe1db9ef729cbe972c83fb886247691fb6beb"


class TestConfig:

    def test_missing_file_gives_defaults(self):
        config = Config.get_singleton()

        assert config.config == {}
        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.network_addresses == {}
        assert config.tx_defaults == {}
        assert config.wallet_addresses == {}
        assert config.is_styles_active is False

    def test_reads_file_from_env(self, write_config):
        config = write_config({
            "network": {"rpc": "http://node:8545", "addresses": {"1337": {"ether_token": ADDRESS}}},
            "tx_defaults": {"gas": 100000},
            "wallet": {"addresses": {"main": ADDRESS}},
            "styles": {"active": True, "bright": True},
        })

        assert config.rpc_url == "http://node:8545"
        assert config.network_addresses == {1337: {"ether_token": ADDRESS}}
        assert config.tx_defaults == {"gas": 100000}
        assert config.wallet_addresses == {"main": ADDRESS}
        assert config.is_styles_active is True
        assert config.is_styles_bright is True

    def test_singleton(self):
        assert Config.get_singleton() is Config.get_singleton()


class TestErrors:

    def test_prefix_is_added_once(self):
        assert str(WethHelperError("boom")) == f"{ERROR_PREFIX} boom"
        assert str(WethHelperError(f"{ERROR_PREFIX} boom")) == f"{ERROR_PREFIX} boom"


class TestNetworkAddresses:

    def test_built_in_network(self):
        addresses = get_contract_addresses_for_network_or_raise(1)

        assert addresses.ether_token == "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2"
        assert addresses.erc20_proxy == Web3.to_checksum_address(NETWORK_ADDRESSES[1].erc20_proxy)

    def test_unknown_network(self):
        with pytest.raises(UnknownNetworkError, match="network 1337"):
            get_contract_addresses_for_network_or_raise(1337)

    def test_config_adds_network(self, write_config):
        config = write_config({"network": {"addresses": {"1337": {"ether_token": ADDRESS, "erc20_proxy": OTHER}}}})

        addresses = get_contract_addresses_for_network_or_raise(1337, config)

        assert addresses.ether_token == Web3.to_checksum_address(ADDRESS)
        assert addresses.erc20_proxy == Web3.to_checksum_address(OTHER)

    def test_config_overrides_single_field(self, write_config):
        write_config({"network": {"addresses": {"50": {"erc20_proxy": OTHER}}}})

        addresses = get_contract_addresses_for_network_or_raise(50)

        assert addresses.ether_token == Web3.to_checksum_address(NETWORK_ADDRESSES[50].ether_token)
        assert addresses.erc20_proxy == Web3.to_checksum_address(OTHER)

    @pytest.mark.parametrize("override", [{"ether_token": ADDRESS}, {"weth": ADDRESS}])
    def test_invalid_config(self, write_config, override):
        write_config({"network": {"addresses": {"1337": override}}})

        with pytest.raises(UnknownNetworkError, match="invalid contract addresses"):
            get_contract_addresses_for_network_or_raise(1337)


class TestTxDefaults:

    @pytest.mark.parametrize("data", [
        {"gas": 1, "gas_price": 2, "from_address": ADDRESS},
        {"gas": 1, "gasPrice": 2, "from": ADDRESS},
    ])
    def test_from_dict(self, data):
        assert TxDefaults.from_dict(data) == TxDefaults(gas=1, gas_price=2, from_address=ADDRESS)

    def test_coerce(self):
        defaults = TxDefaults(gas=1)

        assert TxDefaults.coerce(None) == TxDefaults()
        assert TxDefaults.coerce(defaults) == defaults
        assert TxDefaults.coerce(defaults) is not defaults
        assert TxDefaults.coerce({"gas": 1}) == defaults
        with pytest.raises(TypeError):
            TxDefaults.coerce(1)

    def test_merge_overrides_set_fields_only(self):
        defaults = TxDefaults(gas=1, gas_price=2, from_address=ADDRESS)

        merged = defaults.merge(TxDefaults(gas=5))

        assert merged == TxDefaults(gas=5, gas_price=2, from_address=ADDRESS)
        assert defaults.gas == 1

    def test_to_tx_params(self):
        assert TxDefaults().to_tx_params() == {}
        assert TxDefaults(gas=1, gas_price=2, from_address=ADDRESS).to_tx_params() == {
            "gas": 1,
            "gasPrice": 2,
            "from": Web3.to_checksum_address(ADDRESS),
        }
