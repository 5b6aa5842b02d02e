import pytest

from authtls.exceptions.base import AuthTLSException
from authtls.exceptions.system import AuthTLSSystemException
from authtls.exceptions.user import (
    AuthTLSAssertion,
    AuthTLSUserException,
    ConfigFileNotFoundException,
    InvalidDurationException,
    InvalidPathException,
    InvalidScopeException,
    OptionsParsingException,
)


@pytest.mark.parametrize(
    "exc, code",
    [
        (AuthTLSException, "UnknownAuthTLSException"),
        (AuthTLSUserException, "USER:Unknown"),
        (AuthTLSAssertion, "USER:AssertionError"),
        (OptionsParsingException, "USER:OptionsParsingError"),
        (InvalidScopeException, "USER:InvalidScope"),
        (InvalidPathException, "USER:InvalidPath"),
        (InvalidDurationException, "USER:InvalidDuration"),
        (ConfigFileNotFoundException, "USER:ConfigFileNotFound"),
        (AuthTLSSystemException, "SYSTEM:Unknown"),
    ],
)
def test_error_codes(exc, code):
    assert exc.error_code == code


def test_options_parsing_errors_are_value_errors():
    for exc in (InvalidScopeException, InvalidPathException, InvalidDurationException):
        assert issubclass(exc, OptionsParsingException)
        assert issubclass(exc, ValueError)
        assert issubclass(exc, AuthTLSUserException)
    assert not issubclass(AuthTLSSystemException, AuthTLSUserException)


def test_str():
    e = InvalidScopeException("Scope of credential helper must not be empty")
    assert str(e) == "USER:InvalidScope: error=Scope of credential helper must not be empty"
    assert e.message == "Scope of credential helper must not be empty"
    assert not hasattr(e, "timestamp")

    try:
        try:
            raise KeyError("boom")
        except KeyError as cause:
            raise OptionsParsingException("bad value") from cause
    except OptionsParsingException as e:
        assert str(e) == "USER:OptionsParsingError: error=bad value, cause='boom'"
