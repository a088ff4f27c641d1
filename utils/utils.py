from decimal import Decimal, localcontext

import click

from entity.config import Config


def get_config() -> Config:
    return Config.get_singleton()

def get_wallet_address(wallet: str):
    if wallet is None:
        return None
    for alias, address in Config.get_singleton().wallet_addresses.items():
        if wallet.lower() == alias.lower() or wallet.lower() == address.lower():
            return address
    return wallet

def format_units(value: Decimal) -> str:
    # drops trailing zeros without switching to exponent notation
    if not value:
        return "0"
    with localcontext() as ctx:
        ctx.prec = max(999, len(value.as_tuple().digits))
        return f"{value.normalize():f}"

def print(message: str, type: str = None):
    if not bool(Config.get_singleton().is_styles_active):
        click.secho(message)
        return
    is_bright = bool(Config.get_singleton().is_styles_bright)
    colors = {
        "info": "blue",
        "warning": "yellow",
        "error": "red",
        "success": "green",
    }
    color = colors.get(type, None)
    color = "bright_"+color if (is_bright and color) else color
    if color:
        click.secho(message, fg=color)
    else:
        click.secho(message)
