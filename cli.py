import asyncio
import logging

import click

from entity.errors import WethHelperError
from entity.tx_defaults import TxDefaults
from manager.weth_helper import WethHelper
import utils.utils as utils
import utils.units as units
import utils.web3_utils as web3_utils


def tx_options(func):
    func = click.option('--gas', type=int, help="Gas limit")(func)
    func = click.option('--gas-price', type=int, help="Gas price in wei")(func)
    func = click.option('--wallet', '-w', help="Sender wallet address/alias, defaults to the node's coinbase")(func)
    return func

def get_helper(rpc: str) -> WethHelper:
    config = utils.get_config()
    return WethHelper(rpc or config.rpc_url, TxDefaults.from_dict(config.tx_defaults))

def get_tx_options(wallet, gas, gas_price) -> TxDefaults:
    return TxDefaults(gas=gas, gas_price=gas_price, from_address=utils.get_wallet_address(wallet))

def run(coro):
    try:
        return asyncio.run(coro)
    except WethHelperError as e:
        utils.print(str(e), "error")
        exit(1)


@click.group()
@click.option('--rpc', help="JSON-RPC URL, overrides network.rpc from the config")
@click.option('--verbose', '-v', is_flag=True, default=False, help="Debug logging")
@click.pass_context
def cli(ctx, rpc, verbose):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    ctx.ensure_object(dict)
    ctx.obj['rpc'] = rpc

@click.command(help="Prints network info and WETH contract addresses")
@click.pass_context
def net(ctx):
    async def _net():
        helper = get_helper(ctx.obj['rpc'])
        await helper.wait_until_ready()
        utils.print(f"Network ID: {helper.network_id}")
        utils.print(f"WETH: {helper.weth_address}")
        utils.print(f"ERC-20 proxy: {helper.proxy_address}")
        utils.print(f"Coinbase: {helper.coinbase}")
    run(_net())

@click.command(help="Prints ETH and WETH balance of a wallet (coinbase by default)")
@click.option('--wallet', '-w', help="Ethereum wallet address/alias to get balance for")
@click.pass_context
def balance(ctx, wallet):
    async def _balance():
        helper = get_helper(ctx.obj['rpc'])
        address = utils.get_wallet_address(wallet)
        if address:
            web3_utils.raise_address_not_valid(address)
        eth_balance = await helper.get_ether_balance(address)
        weth_balance = await helper.get_weth_balance(address)
        utils.print(f"{utils.format_units(helper.from_base_units(eth_balance))} ETH")
        utils.print(f"{utils.format_units(helper.from_base_units(weth_balance))} WETH")
    run(_balance())

@click.command(help="Wrap ETH into WETH, amount in ether e.g. `wrap 0.5`")
@click.argument('amount')
@tx_options
@click.pass_context
def wrap(ctx, amount, wallet, gas_price, gas):
    async def _wrap():
        helper = get_helper(ctx.obj['rpc'])
        tx_hash = await helper.wrap(helper.to_base_units(amount), get_tx_options(wallet, gas, gas_price))
        utils.print(f"Transaction hash: {tx_hash}", "success")
    run(_wrap())

@click.command(help="Unwrap WETH into ETH, amount in ether e.g. `unwrap 0.5`")
@click.argument('amount')
@tx_options
@click.pass_context
def unwrap(ctx, amount, wallet, gas_price, gas):
    async def _unwrap():
        helper = get_helper(ctx.obj['rpc'])
        tx_hash = await helper.unwrap(helper.to_base_units(amount), get_tx_options(wallet, gas, gas_price))
        utils.print(f"Transaction hash: {tx_hash}", "success")
    run(_unwrap())

@click.command(help="Prints WETH allowance of the 0x ERC-20 proxy for a wallet (coinbase by default)")
@click.option('--wallet', '-w', help="Owner wallet address/alias")
@click.pass_context
def allowance(ctx, wallet):
    async def _allowance():
        helper = get_helper(ctx.obj['rpc'])
        owner = utils.get_wallet_address(wallet)
        if owner:
            web3_utils.raise_address_not_valid(owner)
        amount = await helper.get_proxy_allowance(owner)
        if amount == units.MAX_UINT256:
            utils.print("unlimited WETH")
        else:
            utils.print(f"{utils.format_units(helper.from_base_units(amount))} WETH")
    run(_allowance())

@click.command(help="Set WETH allowance of the 0x ERC-20 proxy, amount in ether e.g. `approve 10` or `approve --unlimited`")
@click.argument('amount', required=False)
@click.option('--unlimited', '-u', is_flag=True, default=False, help="Set maximum uint256 allowance")
@tx_options
@click.pass_context
def approve(ctx, amount, unlimited, wallet, gas_price, gas):
    if not unlimited and amount is None:
        utils.print("Either AMOUNT or --unlimited is required", "error")
        exit(1)

    async def _approve():
        helper = get_helper(ctx.obj['rpc'])
        options = get_tx_options(wallet, gas, gas_price)
        if unlimited:
            tx_hash = await helper.set_unlimited_proxy_allowance(options)
        else:
            tx_hash = await helper.set_proxy_allowance(helper.to_base_units(amount), options)
        utils.print(f"Transaction hash: {tx_hash}", "success")
    run(_approve())

@click.command("to-base", help="Converts an amount in units to base units e.g. `to-base 1.5`")
@click.argument('value')
@click.option('--decimals', '-d', type=int, default=units.DEFAULT_DECIMALS, help="Token decimals")
def to_base(value, decimals):
    try:
        click.echo(units.to_base_units(value, decimals))
    except WethHelperError as e:
        utils.print(str(e), "error")
        exit(1)

@click.command("from-base", help="Converts an amount in base units to units e.g. `from-base 1500000000000000000`")
@click.argument('value')
@click.option('--decimals', '-d', type=int, default=units.DEFAULT_DECIMALS, help="Token decimals")
def from_base(value, decimals):
    try:
        click.echo(utils.format_units(units.from_base_units(value, decimals)))
    except WethHelperError as e:
        utils.print(str(e), "error")
        exit(1)

cli.add_command(net)
cli.add_command(balance)
cli.add_command(wrap)
cli.add_command(unwrap)
cli.add_command(allowance)
cli.add_command(approve)
cli.add_command(to_base)
cli.add_command(from_base)


if __name__ == '__main__':
    cli()
