import dataclasses

import pytest

from authtls.configuration import ScopedCredentialHelper, parse_scoped_credential_helper
from authtls.exceptions.user import InvalidPathException, InvalidScopeException, OptionsParsingException


@pytest.mark.parametrize(
    "raw, scope, path",
    [
        ("/usr/local/bin/helper", None, "/usr/local/bin/helper"),
        ("helper", None, "helper"),
        ("github.com=/usr/local/bin/helper", "github.com", "/usr/local/bin/helper"),
        ("*.example.com=helper", "*.example.com", "helper"),
        ("a=b=c", "a", "b=c"),
        ("x==y", "x", "=y"),
        (" scope = path ", " scope ", " path "),
        ("~/bin/helper", None, "~/bin/helper"),
        ("example.com=$HOME/helper", "example.com", "$HOME/helper"),
    ],
)
def test_parse(raw, scope, path):
    h = parse_scoped_credential_helper(raw)
    assert h.scope == scope
    assert h.path == path
    assert h == ScopedCredentialHelper(path=path, scope=scope)


@pytest.mark.parametrize(
    "raw, exc",
    [
        ("", InvalidPathException),
        ("=foo", InvalidScopeException),
        ("foo=", InvalidPathException),
        ("=", InvalidScopeException),
    ],
)
def test_parse_errors(raw, exc):
    with pytest.raises(exc) as e:
        parse_scoped_credential_helper(raw)
    assert isinstance(e.value, OptionsParsingException)
    assert "must not be empty" in e.value.message


def test_error_messages():
    with pytest.raises(InvalidScopeException, match="Scope of credential helper must not be empty"):
        parse_scoped_credential_helper("=/usr/local/bin/helper")
    with pytest.raises(InvalidPathException, match="Path to credential helper must not be empty"):
        parse_scoped_credential_helper("github.com=")


def test_parse_none():
    with pytest.raises(TypeError):
        parse_scoped_credential_helper(None)


@pytest.mark.parametrize("raw", ["/usr/local/bin/helper", "github.com=/bin/h", "a=b=c", "x==y"])
def test_canonical_form_reparses(raw):
    h = parse_scoped_credential_helper(raw)
    assert str(h) == raw
    assert parse_scoped_credential_helper(str(h)) == h
    assert ScopedCredentialHelper.from_str(str(h)) == h


def test_invariants_on_construction():
    with pytest.raises(InvalidPathException):
        ScopedCredentialHelper(path="")
    with pytest.raises(InvalidScopeException):
        ScopedCredentialHelper(path="/bin/helper", scope="")
    # A scope-less helper is valid
    assert ScopedCredentialHelper(path="/bin/helper").scope is None


def test_immutable():
    h = parse_scoped_credential_helper("github.com=/bin/helper")
    with pytest.raises(dataclasses.FrozenInstanceError):
        h.path = "/other"


def test_to_dict():
    assert parse_scoped_credential_helper("github.com=/bin/helper").to_dict() == {
        "path": "/bin/helper",
        "scope": "github.com",
    }
    assert parse_scoped_credential_helper("/bin/helper").to_dict() == {"path": "/bin/helper", "scope": None}
