from __future__ import annotations
from decimal import Decimal, InvalidOperation, localcontext

from entity.errors import InvalidAmountError


MAX_UINT256 = 2**256 - 1

DEFAULT_DECIMALS = 18

# ERC-20 decimals are a uint8
MAX_DECIMALS = 255

# enough digits for any uint256 scaled by 10**MAX_DECIMALS
_PRECISION = 999


def _to_integer(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidAmountError(f"expected {name} to be an integer amount, got {type(value).__name__}")
    if isinstance(value, float):
        if not value.is_integer():
            raise InvalidAmountError(f"expected {name} to be an integer amount, got {value}")
        value = Decimal(str(value))
    if isinstance(value, Decimal):
        if not value.is_finite() or value != value.to_integral_value():
            raise InvalidAmountError(f"expected {name} to be an integer amount, got {value}")
        value = int(value)
    if value < 0:
        raise InvalidAmountError(f"expected {name} to be a non-negative amount, got {value}")
    return value


def assert_valid_base_unit_amount(name: str, value) -> int:
    """
    Checks that a value can be passed to a contract as an amount of base units (uint256).

    Args:
        name (str): Argument name used in the error message.
        value (int | Decimal): The amount to check. Integral Decimals are accepted.

    Returns:
        int: The amount as an integer.

    Raises:
        InvalidAmountError: If the value is not an integer, is negative or doesn't fit into uint256.
    """
    if isinstance(value, float):
        raise InvalidAmountError(f"expected {name} to be an integer amount, got float")
    value = _to_integer(name, value)
    if value > MAX_UINT256:
        raise InvalidAmountError(f"expected {name} to fit into uint256, got {value}")
    return value


def _to_decimal(name: str, value) -> Decimal:
    if isinstance(value, bool):
        raise InvalidAmountError(f"invalid {name} (must be positive and numerical)")
    try:
        number = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidAmountError(f"invalid {name} (must be positive and numerical)")
    if not number.is_finite() or number < 0:
        raise InvalidAmountError(f"invalid {name} (must be positive and numerical)")
    return number


def _check_decimals(decimals: int):
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidAmountError(f"invalid decimals: {decimals} (must be between 0 and {MAX_DECIMALS})")


def _precision(number: Decimal) -> int:
    return max(_PRECISION, len(number.as_tuple().digits))


def to_base_units(value, decimals: int = DEFAULT_DECIMALS) -> int:
    """
    Converts a unit value (user representation, e.g. 1.5 ETH) to base units (wei).

    Args:
        value (int | float | str | Decimal): Non-negative numerical value.
        decimals (int): Number of decimals in a unit. Defaults to 18.

    Returns:
        int: The amount in base units.
    """
    _check_decimals(decimals)
    number = _to_decimal("unit value", value)
    with localcontext() as ctx:
        ctx.prec = _precision(number)
        try:
            scaled = number.scaleb(decimals)
        except ArithmeticError:
            raise InvalidAmountError(f"invalid unit value {value}: out of range")
        if scaled != scaled.to_integral_value():
            raise InvalidAmountError(
                f"invalid unit amount {value}: more than {decimals} decimal places"
            )
    return int(scaled)


def from_base_units(value, decimals: int = DEFAULT_DECIMALS) -> Decimal:
    """
    Converts a base unit value (wei) to unit representation used to display values to users.
    Any non-negative integer is accepted, there is no uint256 bound here.
    """
    _check_decimals(decimals)
    if isinstance(value, str):
        value = _to_decimal("base unit value", value)
    amount = Decimal(_to_integer("value", value))
    with localcontext() as ctx:
        ctx.prec = _precision(amount)
        return amount.scaleb(-decimals)
