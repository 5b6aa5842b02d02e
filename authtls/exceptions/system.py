from authtls.exceptions.base import AuthTLSException


class AuthTLSSystemException(AuthTLSException):
    _ERROR_CODE = "SYSTEM:Unknown"
