import datetime

import click
import mock
import pytest

from authtls.configuration import ScopedCredentialHelper
from authtls.interaction.click_types import (
    CommaSeparatedListParamType,
    DurationParamType,
    ScopedCredentialHelperParamType,
)

dummy_param = click.Option(["--dummy"], type=click.STRING, default="dummy")


def test_duration_type():
    t = DurationParamType()
    assert t.convert(value="1 day", param=None, ctx=None) == datetime.timedelta(days=1)
    assert t.convert(value="20s", param=dummy_param, ctx=None) == datetime.timedelta(seconds=20)

    with pytest.raises(click.BadParameter):
        t.convert(None, None, None)

    with pytest.raises(click.BadParameter, match="minimum"):
        t.convert("0s", dummy_param, None)

    with pytest.raises(click.BadParameter, match="not a valid duration"):
        t.convert("later", dummy_param, None)


def test_duration_type_without_minimum():
    t = DurationParamType(minimum=None)
    assert t.convert("0s", None, None) == datetime.timedelta(0)


def test_scoped_credential_helper_type():
    m = mock.MagicMock()
    t = ScopedCredentialHelperParamType()
    assert t.convert("github.com=/bin/gh", m, m) == ScopedCredentialHelper(path="/bin/gh", scope="github.com")
    assert t.convert("/bin/default", m, m) == ScopedCredentialHelper(path="/bin/default")

    h = ScopedCredentialHelper(path="/bin/default")
    assert t.convert(h, m, m) is h


@pytest.mark.parametrize(
    "value, message",
    [
        ("=/bin/gh", "Scope of credential helper must not be empty"),
        ("github.com=", "Path to credential helper must not be empty"),
        ("", "Path to credential helper must not be empty"),
    ],
)
def test_scoped_credential_helper_type_errors(value, message):
    with pytest.raises(click.BadParameter, match=message):
        ScopedCredentialHelperParamType().convert(value, dummy_param, None)


def test_comma_separated_list_type():
    t = CommaSeparatedListParamType()
    assert t.convert("a,b", None, None) == ["a", "b"]
    assert t.convert("", None, None) == []
