"""
String to value converters for the auth and TLS options. Each converter either returns the typed value or raises an
:class:`~authtls.exceptions.user.OptionsParsingException` subclass, they are shared by the config file / environment
loader and by the click parameter types.
"""
import datetime
import typing

from pytimeparse import parse as _parse_duration_string

from authtls.configuration.credential_helper import ScopedCredentialHelper, parse_scoped_credential_helper
from authtls.exceptions.user import InvalidDurationException

ONE_SECOND = datetime.timedelta(seconds=1)


def parse_duration(
    value: typing.Union[str, datetime.timedelta], minimum: typing.Optional[datetime.timedelta] = ONE_SECOND
) -> datetime.timedelta:
    """
    Converts a human readable duration like ``30m``, ``20s``, ``1h30m`` or ``1 day`` into a timedelta.
    Uses https://github.com/wroberts/pytimeparse for parsing.

    :param value: the duration string, timedeltas are only checked against ``minimum``
    :param minimum: smallest accepted duration, None disables the check. Times are treated as second granularity, so
        by default anything below one second is an error.
    """
    if isinstance(value, datetime.timedelta):
        d = value
    else:
        if not isinstance(value, str):
            raise InvalidDurationException(f"{value!r} cannot be converted to a duration, expected something like 30s")
        seconds = _parse_duration_string(value.strip())
        if seconds is None:
            raise InvalidDurationException(f"'{value}' is not a valid duration, expected something like 30s or 5m")
        d = datetime.timedelta(seconds=seconds)

    if minimum is not None and d < minimum:
        raise InvalidDurationException(f"Duration '{value}' is smaller than the minimum of {minimum}")
    return d


def parse_comma_separated_list(value: typing.Union[str, typing.Sequence[str]]) -> typing.List[str]:
    """
    Splits ``a,b,c`` into ``["a", "b", "c"]``. The empty string is the empty list, other empty items are kept.
    """
    if isinstance(value, str):
        return value.split(",") if value else []
    return list(value)


def parse_credential_helpers(
    values: typing.Union[str, typing.Iterable[str]]
) -> typing.List[ScopedCredentialHelper]:
    """
    Parses several ``[scope=]path`` values, keeping their order. A single string holds one value per line, which is
    how config files and environment variables carry more than one helper; blank lines are skipped.
    """
    if isinstance(values, str):
        values = [line for line in values.splitlines() if line.strip()]
    return [v if isinstance(v, ScopedCredentialHelper) else parse_scoped_credential_helper(v) for v in values]
