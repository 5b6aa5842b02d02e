import datetime
import typing

import rich_click as click

from authtls.configuration.converters import ONE_SECOND, parse_comma_separated_list, parse_duration
from authtls.configuration.credential_helper import ScopedCredentialHelper, parse_scoped_credential_helper
from authtls.exceptions.user import OptionsParsingException


class DurationParamType(click.ParamType):
    name = "[20s | 5m | 1h30m | 1 day | ...]"

    def __init__(self, minimum: typing.Optional[datetime.timedelta] = ONE_SECOND):
        self._minimum = minimum

    def convert(
        self, value: typing.Any, param: typing.Optional[click.Parameter], ctx: typing.Optional[click.Context]
    ) -> typing.Any:
        if value is None:
            self.fail("None value cannot be converted to a Duration type.", param, ctx)
        try:
            return parse_duration(value, minimum=self._minimum)
        except OptionsParsingException as e:
            self.fail(e.message, param, ctx)


class ScopedCredentialHelperParamType(click.ParamType):
    """
    Converts one ``[scope=]path`` option value into a ScopedCredentialHelper.
    """

    name = "[scope=]path"

    def convert(
        self, value: typing.Any, param: typing.Optional[click.Parameter], ctx: typing.Optional[click.Context]
    ) -> typing.Any:
        if isinstance(value, ScopedCredentialHelper):
            return value
        try:
            return parse_scoped_credential_helper(value)
        except OptionsParsingException as e:
            self.fail(e.message, param, ctx)
        except TypeError as e:
            self.fail(str(e), param, ctx)


class CommaSeparatedListParamType(click.ParamType):
    name = "comma-separated list"

    def convert(
        self, value: typing.Any, param: typing.Optional[click.Parameter], ctx: typing.Optional[click.Context]
    ) -> typing.Any:
        return parse_comma_separated_list(value)
