class NamingException(Exception):
    """Base exception class for all naming exceptions."""
    error_code: str = "NAMING_ERROR"
    origin: str = "naming"
    data: dict = {}

    def __init__(self, message: str, **kwargs):
        super().__init__(message)
        self.data = kwargs


class InvalidArgument(NamingException, ValueError):
    """Exception raised when an argument is missing or malformed."""
    error_code = "INVALID_ARGUMENT"

    def __init__(self, message: str, param_name: str, **kwargs):
        super().__init__(message, param_name=param_name, **kwargs)
        self.param_name = param_name


class OutOfRange(InvalidArgument):
    """Exception raised when an index falls outside of the string."""
    error_code = "OUT_OF_RANGE"


class InvalidConfiguration(NamingException):
    """Exception raised when naming settings can't be turned into a resolver."""
    error_code = "INVALID_CONFIGURATION"
    origin = "configuration"
