import datetime

import pytest

from authtls.configuration import (
    ScopedCredentialHelper,
    parse_comma_separated_list,
    parse_credential_helpers,
    parse_duration,
)
from authtls.exceptions.user import InvalidDurationException, InvalidScopeException


@pytest.mark.parametrize(
    "value, expected",
    [
        ("20s", datetime.timedelta(seconds=20)),
        ("5m", datetime.timedelta(minutes=5)),
        ("30m", datetime.timedelta(minutes=30)),
        ("1h", datetime.timedelta(hours=1)),
        ("1 day", datetime.timedelta(days=1)),
        ("1s", datetime.timedelta(seconds=1)),
        (datetime.timedelta(seconds=10), datetime.timedelta(seconds=10)),
    ],
)
def test_parse_duration(value, expected):
    assert parse_duration(value) == expected


@pytest.mark.parametrize("value", ["0s", "abc", "", datetime.timedelta(milliseconds=500), datetime.timedelta(0)])
def test_parse_duration_rejects(value):
    with pytest.raises(InvalidDurationException):
        parse_duration(value)


@pytest.mark.parametrize("value", [None, 5, 1.5, ["30s"]])
def test_parse_duration_wrong_type(value):
    with pytest.raises(InvalidDurationException):
        parse_duration(value)


def test_parse_duration_without_minimum():
    assert parse_duration("0s", minimum=None) == datetime.timedelta(0)


def test_parse_comma_separated_list():
    assert parse_comma_separated_list("a,b") == ["a", "b"]
    assert parse_comma_separated_list("a") == ["a"]
    assert parse_comma_separated_list("") == []
    assert parse_comma_separated_list("a,,b") == ["a", "", "b"]
    assert parse_comma_separated_list(("x", "y")) == ["x", "y"]


def test_parse_credential_helpers_keeps_order():
    helpers = parse_credential_helpers(["b.com=/b", "/default", "a.com=/a"])
    assert [str(h) for h in helpers] == ["b.com=/b", "/default", "a.com=/a"]


def test_parse_credential_helpers_from_lines():
    helpers = parse_credential_helpers("\ngithub.com=/bin/gh\n\n/bin/default\n")
    assert helpers == [
        ScopedCredentialHelper(path="/bin/gh", scope="github.com"),
        ScopedCredentialHelper(path="/bin/default"),
    ]


def test_parse_credential_helpers_fails_on_any_bad_value():
    with pytest.raises(InvalidScopeException):
        parse_credential_helpers(["github.com=/bin/gh", "=/bin/h"])
