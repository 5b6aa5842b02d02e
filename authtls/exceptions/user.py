from authtls.exceptions.base import AuthTLSException as _AuthTLSException


class AuthTLSUserException(_AuthTLSException):
    _ERROR_CODE = "USER:Unknown"


class AuthTLSAssertion(AuthTLSUserException, AssertionError):
    _ERROR_CODE = "USER:AssertionError"


class OptionsParsingException(AuthTLSUserException, ValueError):
    """
    Raised when a raw option value (from the command line, the environment or a config file) cannot be converted
    into its typed form. The whole configuration load fails, the offending value is never dropped silently.
    """

    _ERROR_CODE = "USER:OptionsParsingError"

    @property
    def message(self) -> str:
        return self.args[0] if self.args else ""


class InvalidScopeException(OptionsParsingException):
    _ERROR_CODE = "USER:InvalidScope"


class InvalidPathException(OptionsParsingException):
    _ERROR_CODE = "USER:InvalidPath"


class InvalidDurationException(OptionsParsingException):
    _ERROR_CODE = "USER:InvalidDuration"


class ConfigFileNotFoundException(AuthTLSUserException):
    _ERROR_CODE = "USER:ConfigFileNotFound"
