from functools import wraps

from web3 import Web3


def to_checksum_address(*arg_nums):
    """
    A decorator to convert specified string arguments to their checksum address format using Web3.
    Works for both plain functions and coroutine functions.

    Args:
        *arg_nums (int): Variable length argument list specifying the positions of the arguments
                         that need to be converted to checksum addresses.

    Returns:
        function: A wrapper function that processes the specified arguments and keyword arguments
                  to convert them to checksum addresses before calling the original function.

    Example:
        @to_checksum_address(1, 2)
        async def get_allowance(self, owner_address, spender_address):
            pass

        In this example, owner_address and spender_address will be checksummed if they are strings.
    """
    def inner_to_checksum_address(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            new_args = [
                Web3.to_checksum_address(arg) if isinstance(arg, str) and i in arg_nums else arg
                for i, arg in enumerate(args)
            ]
            new_kwargs = {
                k: (
                    Web3.to_checksum_address(v)
                    if "address" in k.lower() and isinstance(v, str)
                    else v
                )
                for k, v in kwargs.items()
            }
            return func(*new_args, **new_kwargs)

        return wrapper

    return inner_to_checksum_address
