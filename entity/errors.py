ERROR_PREFIX = "[weth-helper]"


class WethHelperError(Exception):
    """
    Base error for everything raised by the helper. The message is always
    prefixed with ERROR_PREFIX.
    """

    def __init__(self, message: str):
        if not message.startswith(ERROR_PREFIX):
            message = f"{ERROR_PREFIX} {message}"
        super().__init__(message)


class InvalidAmountError(WethHelperError, ValueError):
    pass


class UnknownNetworkError(WethHelperError):
    pass
